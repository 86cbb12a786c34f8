"""Govee cloud gateway for govee-control.

Uses the Govee OpenAPI router endpoints for device state and control.
API docs: https://developer.govee.com/reference/get-devices-status
"""

import logging
from typing import Any

import httpx

from govee_control.config import GOVEE_API_BASE, DeviceAddress, GoveeSettings
from govee_control.devices.base import DeviceGateway
from govee_control.models.capability import Capability, DeviceState
from govee_control.utils.errors import ProtocolError, TransportError, generate_request_id

logger = logging.getLogger(__name__)


class GoveeCloudGateway(DeviceGateway):
    """Device gateway backed by the Govee cloud API."""

    def __init__(
        self,
        api_key: str,
        api_base: str = GOVEE_API_BASE,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ):
        self._api_key = api_key
        self._api_base = api_base.rstrip("/")
        self._timeout = timeout
        self._client = client
        self._owns_client = client is None

    @classmethod
    def from_settings(cls, settings: GoveeSettings) -> "GoveeCloudGateway":
        return cls(
            api_key=settings.api_key,
            api_base=settings.api_base,
            timeout=settings.timeout,
        )

    async def __aenter__(self) -> "GoveeCloudGateway":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    def _get_headers(self) -> dict[str, str]:
        """Get API headers."""
        return {
            "Govee-API-Key": self._api_key,
            "Content-Type": "application/json",
        }

    async def _ensure_client(self) -> httpx.AsyncClient:
        """Ensure HTTP client exists."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
            self._owns_client = True
        return self._client

    async def _post(self, endpoint: str, payload: dict[str, Any]) -> dict[str, Any]:
        """POST a request body to the Govee API and return the decoded JSON."""
        client = await self._ensure_client()
        url = f"{self._api_base}{endpoint}"
        body = {"requestId": generate_request_id(), "payload": payload}
        logger.debug(f"POST {endpoint} requestId={body['requestId']}")

        try:
            response = await client.post(url, headers=self._get_headers(), json=body)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error(f"Govee API error for {endpoint}: {status}")
            raise TransportError(
                f"Govee API returned HTTP {status} for {endpoint}", status_code=status
            ) from e
        except httpx.RequestError as e:
            logger.error(f"Govee request error for {endpoint}: {e}")
            raise TransportError(f"Govee request to {endpoint} failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise ProtocolError(f"Govee API returned a non-JSON body for {endpoint}") from e

        if not isinstance(data, dict):
            raise ProtocolError(f"Govee API returned an unexpected body for {endpoint}")

        code = data.get("code")
        if code is not None and code != 200:
            message = data.get("msg") or data.get("message") or "unknown error"
            logger.error(f"Govee API rejected {endpoint}: {code} {message}")
            raise TransportError(f"Govee API error {code}: {message}", status_code=code)

        return data

    async def read_state(self, address: DeviceAddress) -> DeviceState:
        """Fetch current capability state from Govee cloud."""
        data = await self._post("/device/state", address.to_payload())

        payload = data.get("payload")
        if not isinstance(payload, dict) or "capabilities" not in payload:
            raise ProtocolError("Govee state response is missing payload.capabilities")

        state = DeviceState.from_capabilities(payload["capabilities"])
        logger.debug(
            f"Read state for {address.sku}/{address.device}: "
            f"on={state.is_on}, color={state.current_color}"
        )
        return state

    async def control(self, address: DeviceAddress, capability: Capability) -> None:
        """Send one capability command to the device."""
        payload = {**address.to_payload(), "capability": capability.to_payload()}
        await self._post("/device/control", payload)
        logger.debug(f"Sent {capability.instance}={capability.value} to {address.device}")

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and self._owns_client:
            await self._client.aclose()
        self._client = None
