"""Control a Govee light through the Govee cloud API."""

from govee_control.color import pack_rgb, parse_hex
from govee_control.config import DeviceAddress, GoveeSettings, load_settings
from govee_control.devices import DeviceGateway, GoveeCloudGateway
from govee_control.dispatcher import EventDispatcher
from govee_control.models import Capability, DeviceState, EventName, EventRequest, EventResult

__version__ = "0.1.0"

__all__ = [
    "Capability",
    "DeviceAddress",
    "DeviceGateway",
    "DeviceState",
    "EventDispatcher",
    "EventName",
    "EventRequest",
    "EventResult",
    "GoveeCloudGateway",
    "GoveeSettings",
    "load_settings",
    "pack_rgb",
    "parse_hex",
]
