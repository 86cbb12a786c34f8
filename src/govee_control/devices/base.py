"""Device gateway interface."""

from abc import ABC, abstractmethod

from govee_control.config import DeviceAddress
from govee_control.models.capability import Capability, DeviceState


class DeviceGateway(ABC):
    """Reads capability state from and sends capability commands to a device.

    Every call is a single, independent remote operation. Implementations
    never retry and never confirm a write with a follow-up read.
    """

    @abstractmethod
    async def read_state(self, address: DeviceAddress) -> DeviceState:
        """Fetch the current capability state of the device.

        Raises:
            TransportError: On network or HTTP failure
            ProtocolError: If the response is not a capability list
        """
        pass

    @abstractmethod
    async def control(self, address: DeviceAddress, capability: Capability) -> None:
        """Write one capability to the device.

        Raises:
            TransportError: On network or HTTP failure
            ProtocolError: If the response cannot be interpreted
        """
        pass

    async def close(self) -> None:
        """Close any open connections/resources.

        Subclasses should override this to clean up resources.
        """
        pass
