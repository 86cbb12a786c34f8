"""Device gateways for govee-control."""

from govee_control.devices.base import DeviceGateway
from govee_control.devices.govee import GoveeCloudGateway

__all__ = [
    "DeviceGateway",
    "GoveeCloudGateway",
]
