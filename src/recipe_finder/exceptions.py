"""Custom exceptions for the recipe finder agent."""


class RecipeFinderError(Exception):
    """Base exception for recipe finder errors."""

    pass


class ConfigurationError(RecipeFinderError):
    """Raised when a configuration value cannot be applied."""

    pass


class AgentRunError(RecipeFinderError):
    """Raised when an agent run fails before reaching its final event."""

    pass
