"""Event request and result models."""

from dataclasses import dataclass
from enum import Enum

from govee_control.utils.errors import UnknownEvent


class EventName(Enum):
    """Events the dispatcher understands."""

    TURN_ON = "turn_on"
    TURN_OFF = "turn_off"
    FLASH = "flash"
    RESET = "reset"
    SET_COLOR = "set_color"

    @classmethod
    def parse(cls, name: str) -> "EventName":
        """Look up an event by name, ignoring case and surrounding whitespace."""
        try:
            return cls((name or "").strip().lower())
        except ValueError:
            raise UnknownEvent(name) from None


@dataclass(frozen=True)
class EventRequest:
    """A single requested event and its parameters."""

    event: EventName
    hex: str | None = None
    prevent_override: bool = False

    @classmethod
    def create(
        cls,
        event: str,
        hex: str | None = None,
        prevent_override: bool = False,
    ) -> "EventRequest":
        """Build a request from raw caller input.

        Raises:
            UnknownEvent: If the event name is not recognized
        """
        return cls(
            event=EventName.parse(event),
            hex=hex or None,
            prevent_override=bool(prevent_override),
        )


@dataclass(frozen=True)
class EventResult:
    """Outcome of handling one event."""

    event: EventName
    performed: bool
    message: str
    calls: int = 0

    def to_dict(self) -> dict[str, object]:
        return {
            "event": self.event.value,
            "performed": self.performed,
            "message": self.message,
            "calls": self.calls,
        }
