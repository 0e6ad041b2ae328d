"""Session contracts shared by all interactive pickers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar

T = TypeVar("T")


class EmptyCandidatesError(LookupError):
    """Raised before a session starts when there is nothing to choose from."""


@dataclass(frozen=True)
class SessionResult(Generic[T]):
    """Terminal outcome of one session: cancelled, or a selection."""

    cancelled: bool
    selection: T | None = None

    @classmethod
    def cancel(cls) -> SessionResult[T]:
        return cls(cancelled=True)

    @classmethod
    def selected(cls, value: T) -> SessionResult[T]:
        return cls(cancelled=False, selection=value)


class Session(Protocol[T]):
    """Event-driven picker driven by :func:`lazypick.runtime.loop.run_session`."""

    done: bool

    def handle_key(self, key: str) -> None: ...

    def resize(self, width: int, height: int) -> None: ...

    def render(self) -> list[str]: ...

    def result(self) -> SessionResult[T]: ...
