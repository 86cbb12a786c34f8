"""Event dispatcher for govee-control.

Turns a requested event into an ordered sequence of capability commands.
All remote calls for one event are awaited one after another.
"""

import asyncio
import logging
from typing import Awaitable, Callable

from govee_control.color import hex_to_color_value, pack_rgb, parse_hex, rgb_to_hex
from govee_control.config import DEFAULT_BASE_COLOR, DeviceAddress
from govee_control.devices.base import DeviceGateway
from govee_control.models.capability import Capability
from govee_control.models.event import EventName, EventRequest, EventResult
from govee_control.utils.errors import MissingParameter

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]

DEFAULT_FLASH_DURATION_MS = 3000
DEFAULT_FLASH_INTERVAL_MS = 500


def flash_cycles(duration_ms: int, interval_ms: int) -> int:
    """Number of on/off cycles that fit into a flash of the given duration."""
    if interval_ms <= 0:
        raise ValueError("Flash interval must be positive")
    return max(0, duration_ms // (interval_ms * 2))


class EventDispatcher:
    """Handles events for one light through a device gateway."""

    def __init__(
        self,
        gateway: DeviceGateway,
        address: DeviceAddress,
        base_color: str = DEFAULT_BASE_COLOR,
        sleep: Sleep = asyncio.sleep,
        flash_duration_ms: int = DEFAULT_FLASH_DURATION_MS,
        flash_interval_ms: int = DEFAULT_FLASH_INTERVAL_MS,
    ):
        self.gateway = gateway
        self.address = address
        self.base_color = base_color or DEFAULT_BASE_COLOR
        self._sleep = sleep
        self.flash_duration_ms = flash_duration_ms
        self.flash_interval_ms = flash_interval_ms

    async def dispatch(
        self,
        event: str,
        hex: str | None = None,
        prevent_override: bool = False,
    ) -> EventResult:
        """Handle an event given as raw caller input."""
        request = EventRequest.create(event, hex=hex, prevent_override=prevent_override)
        return await self.handle(request)

    async def handle(self, request: EventRequest) -> EventResult:
        """Handle one event request.

        Raises:
            MissingParameter: If a required parameter is absent
            InvalidColorFormat: If a color is not a 6-digit hex value
            TransportError: If a remote call fails
            ProtocolError: If a remote response cannot be interpreted
        """
        event = request.event
        logger.info(f"Handling event {event.value} for {self.address.device}")

        if event == EventName.TURN_ON:
            await self._set_power(True)
            return EventResult(event, True, "Light turned on", calls=1)

        if event == EventName.TURN_OFF:
            await self._set_power(False)
            return EventResult(event, True, "Light turned off", calls=1)

        if event == EventName.SET_COLOR:
            return await self._set_color(request)

        if event == EventName.RESET:
            return await self.reset()

        if event == EventName.FLASH:
            return await self.flash(request.hex or self.base_color)

        raise AssertionError(f"Unhandled event: {event}")

    async def _set_color(self, request: EventRequest) -> EventResult:
        if not request.hex:
            raise MissingParameter(request.event.value, "hex")
        # Parsed before the state read: a malformed color fails even when the
        # light is off and prevent_override is set.
        rgb = parse_hex(request.hex)
        calls = 0

        state = await self.gateway.read_state(self.address)
        if not state.is_on:
            if request.prevent_override:
                message = "Light is off and prevent-override is set; no action taken."
                logger.info(message)
                return EventResult(request.event, False, message, calls=0)
            logger.info("Light is off; turning on first...")
            await self._set_power(True)
            calls += 1

        logger.info(f"Setting color to hex {request.hex} -> RGB{rgb}")
        await self._set_color_value(pack_rgb(*rgb))
        calls += 1
        return EventResult(request.event, True, f"Color set to {rgb_to_hex(*rgb)}", calls=calls)

    async def reset(self) -> EventResult:
        """Turn the light on and set it to the configured base color."""
        rgb = parse_hex(self.base_color)

        await self._set_power(True)
        await self._set_color_value(pack_rgb(*rgb))
        logger.info(f"Reset color to hex {self.base_color} -> RGB{rgb}")
        return EventResult(EventName.RESET, True, f"Color reset to {rgb_to_hex(*rgb)}", calls=2)

    async def flash(
        self,
        hex_color: str,
        duration_ms: int | None = None,
        interval_ms: int | None = None,
    ) -> EventResult:
        """Flash the light in a color, then restore the color it had before.

        When the state read reports no color, the base color is restored.
        """
        duration_ms = self.flash_duration_ms if duration_ms is None else duration_ms
        interval_ms = self.flash_interval_ms if interval_ms is None else interval_ms
        cycles = flash_cycles(duration_ms, interval_ms)
        flash_value = hex_to_color_value(hex_color)
        calls = 0

        state = await self.gateway.read_state(self.address)
        restore_value = state.current_color
        if restore_value is None:
            logger.warning(
                f"No current color reported for {self.address.device}; "
                f"restoring base color {self.base_color}"
            )
            restore_value = hex_to_color_value(self.base_color)

        logger.info(f"Flash start: {hex_color} ({cycles} cycles of {interval_ms}ms)")
        interval = interval_ms / 1000
        for _ in range(cycles):
            await self._set_power(True)
            await self._set_color_value(flash_value)
            await self._sleep(interval)
            await self._set_power(False)
            await self._sleep(interval)
            calls += 3

        await self._set_power(True)
        await self._set_color_value(restore_value)
        calls += 2
        logger.info("Flash complete")
        return EventResult(EventName.FLASH, True, f"Flashed {hex_color} {cycles} times", calls=calls)

    async def _set_power(self, on: bool) -> None:
        await self.gateway.control(self.address, Capability.power(on))

    async def _set_color_value(self, rgb: int) -> None:
        await self.gateway.control(self.address, Capability.color(rgb))
