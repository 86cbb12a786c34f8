"""Capability models for the Govee cloud API."""

from dataclasses import dataclass, field
from typing import Any

from govee_control.utils.errors import ProtocolError

ON_OFF = "devices.capabilities.on_off"
COLOR_SETTING = "devices.capabilities.color_setting"

POWER_SWITCH = "powerSwitch"
COLOR_RGB = "colorRgb"


@dataclass(frozen=True)
class Capability:
    """One controllable attribute of a device.

    Used both as a snapshot read from device state and as a control command.
    """

    type: str
    instance: str
    value: Any = None

    @property
    def key(self) -> tuple[str, str]:
        return (self.type, self.instance)

    def to_payload(self) -> dict[str, Any]:
        """Return the capability as sent in a control request."""
        return {"type": self.type, "instance": self.instance, "value": self.value}

    @classmethod
    def power(cls, on: bool) -> "Capability":
        """Build a powerSwitch command."""
        return cls(ON_OFF, POWER_SWITCH, 1 if on else 0)

    @classmethod
    def color(cls, rgb: int) -> "Capability":
        """Build a colorRgb command from a packed RGB value."""
        return cls(COLOR_SETTING, COLOR_RGB, rgb)


@dataclass
class DeviceState:
    """Capability snapshots returned by a single state read."""

    capabilities: dict[tuple[str, str], Capability] = field(default_factory=dict)

    def get(self, type_: str, instance: str) -> Capability | None:
        return self.capabilities.get((type_, instance))

    @property
    def is_on(self) -> bool:
        power = self.get(ON_OFF, POWER_SWITCH)
        return power is not None and power.value == 1

    @property
    def current_color(self) -> int | None:
        color = self.get(COLOR_SETTING, COLOR_RGB)
        if color is None or not isinstance(color.value, int):
            return None
        return color.value

    @classmethod
    def from_capabilities(cls, raw: Any) -> "DeviceState":
        """Build state from the ``payload.capabilities`` list of a state response.

        Raises:
            ProtocolError: If the list or one of its entries is malformed
        """
        if not isinstance(raw, list):
            raise ProtocolError(f"Expected a capability list, got {type(raw).__name__}")

        capabilities: dict[tuple[str, str], Capability] = {}
        for entry in raw:
            if not isinstance(entry, dict):
                raise ProtocolError(f"Malformed capability entry: {entry!r}")
            cap_type = entry.get("type")
            instance = entry.get("instance")
            if not isinstance(cap_type, str) or not isinstance(instance, str):
                raise ProtocolError(f"Capability entry missing type/instance: {entry!r}")

            state = entry.get("state")
            value = state.get("value") if isinstance(state, dict) else None

            capability = Capability(cap_type, instance, value)
            if capability.key in capabilities:
                raise ProtocolError(f"Duplicate capability in state: {cap_type}/{instance}")
            capabilities[capability.key] = capability

        return cls(capabilities=capabilities)
