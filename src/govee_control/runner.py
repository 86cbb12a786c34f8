"""Wiring shared by the CLI and Lambda entry points."""

import logging
from pathlib import Path

from govee_control.config import GoveeSettings, load_settings
from govee_control.devices.govee import GoveeCloudGateway
from govee_control.dispatcher import EventDispatcher
from govee_control.models.event import EventRequest, EventResult

logger = logging.getLogger(__name__)


async def run_event(
    request: EventRequest,
    settings: GoveeSettings | None = None,
    config_dir: Path | str | None = None,
) -> EventResult:
    """Load settings, open a gateway and handle one event."""
    if settings is None:
        settings = load_settings(config_dir)

    async with GoveeCloudGateway.from_settings(settings) as gateway:
        dispatcher = EventDispatcher(
            gateway,
            settings.address,
            base_color=settings.base_color,
        )
        result = await dispatcher.handle(request)

    logger.info(f"{result.event.value}: {result.message} ({result.calls} control calls)")
    return result
