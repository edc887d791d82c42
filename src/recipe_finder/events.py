"""Normalized events emitted by an agent run."""

from dataclasses import dataclass
from typing import Any, ClassVar, Union


@dataclass(frozen=True)
class TextEvent:
    """Assistant text output."""

    type: ClassVar[str] = "text"

    text: str

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "text": self.text}


@dataclass(frozen=True)
class ToolEvent:
    """The agent invoked a tool."""

    type: ClassVar[str] = "tool"

    name: str

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "name": self.name}


@dataclass(frozen=True)
class UsageEvent:
    """Token usage reported by the agent runtime."""

    type: ClassVar[str] = "usage"

    input: int = 0
    output: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "input": self.input, "output": self.output}


@dataclass(frozen=True)
class ResultEvent:
    """Final summary text of the run."""

    type: ClassVar[str] = "result"

    text: str

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "text": self.text}


@dataclass(frozen=True)
class DoneEvent:
    """Terminal marker, always the last event of a run."""

    type: ClassVar[str] = "done"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type}


AgentEvent = Union[TextEvent, ToolEvent, UsageEvent, ResultEvent, DoneEvent]
