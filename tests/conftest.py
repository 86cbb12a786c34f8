"""Pytest configuration and fixtures for govee-control tests."""

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from govee_control.config import DeviceAddress
from govee_control.devices.base import DeviceGateway
from govee_control.dispatcher import EventDispatcher
from govee_control.models.capability import (
    COLOR_RGB,
    COLOR_SETTING,
    ON_OFF,
    POWER_SWITCH,
    Capability,
    DeviceState,
)
from govee_control.utils.errors import TransportError


def state_payload(is_on: bool | None = None, color: int | None = None) -> list[dict[str, Any]]:
    """Build a payload.capabilities list as the Govee API returns it."""
    capabilities: list[dict[str, Any]] = [
        {"type": "devices.capabilities.online", "instance": "online", "state": {"value": True}},
    ]
    if is_on is not None:
        capabilities.append(
            {"type": ON_OFF, "instance": POWER_SWITCH, "state": {"value": 1 if is_on else 0}}
        )
    if color is not None:
        capabilities.append({"type": COLOR_SETTING, "instance": COLOR_RGB, "state": {"value": color}})
    return capabilities


@dataclass
class RecordingGateway(DeviceGateway):
    """In-memory gateway that records every call in order."""

    state: DeviceState = field(default_factory=DeviceState)
    calls: list[tuple[str, Any]] = field(default_factory=list)
    fail_on_control: int | None = None
    clock: Any = None

    @property
    def reads(self) -> int:
        return sum(1 for name, _ in self.calls if name == "read_state")

    @property
    def controls(self) -> list[Capability]:
        return [cap for name, cap in self.calls if name == "control"]

    async def read_state(self, address: DeviceAddress) -> DeviceState:
        self.calls.append(("read_state", address))
        return self.state

    async def control(self, address: DeviceAddress, capability: Capability) -> None:
        if self.fail_on_control is not None and len(self.controls) == self.fail_on_control:
            raise TransportError("simulated failure", status_code=503)
        self.calls.append(("control", capability))
        if self.clock is not None:
            self.clock.events.append(("control", self.clock.now, capability))


@dataclass
class FakeClock:
    """Async sleep replacement that advances virtual time instantly."""

    now: float = 0.0
    sleeps: list[float] = field(default_factory=list)
    events: list[tuple[str, float, Any]] = field(default_factory=list)

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.events.append(("sleep", self.now, seconds))
        self.now += seconds


ON = Capability.power(True)
OFF = Capability.power(False)


@pytest.fixture
def address() -> DeviceAddress:
    return DeviceAddress(sku="H6008", device="AA:BB:CC:DD:EE:FF:00:11")


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def gateway(clock: FakeClock) -> RecordingGateway:
    return RecordingGateway(clock=clock)


@pytest.fixture
def dispatcher(gateway: RecordingGateway, address: DeviceAddress, clock: FakeClock) -> EventDispatcher:
    return EventDispatcher(gateway, address, base_color="FFFFFF", sleep=clock.sleep)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Clear Govee environment variables and run from an empty directory."""
    for name in (
        "GOVEE_API_KEY",
        "GOVEE_DEVICE_ID",
        "GOVEE_DEVICE_MODEL",
        "GOVEE_API_BASE",
        "GOVEE_TIMEOUT",
        "GOVEE_BASE_COLOR",
        "BASE_COLOR",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
