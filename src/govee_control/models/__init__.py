"""Data models for govee-control."""

from govee_control.models.capability import (
    COLOR_RGB,
    COLOR_SETTING,
    ON_OFF,
    POWER_SWITCH,
    Capability,
    DeviceState,
)
from govee_control.models.event import EventName, EventRequest, EventResult

__all__ = [
    "COLOR_RGB",
    "COLOR_SETTING",
    "ON_OFF",
    "POWER_SWITCH",
    "Capability",
    "DeviceState",
    "EventName",
    "EventRequest",
    "EventResult",
]
