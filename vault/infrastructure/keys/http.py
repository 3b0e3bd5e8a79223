"""HTTP adapter for the KeyService port."""

import logging
from typing import Any

import httpx

from vault.config import KeyServiceConfig
from vault.domain.keys.port.key_service import KeyService
from vault.domain.shared.error import KeyServiceError

logger = logging.getLogger(__name__)


class HttpKeyService(KeyService):
    """Talks JSON to a threshold key derivation service.

    Byte fields travel hex-encoded. Every request names the configured
    master key and curve.
    """

    def __init__(self, config: KeyServiceConfig, http_client: httpx.AsyncClient) -> None:
        self._config = config
        self._http = http_client

    @property
    def _key_id(self) -> dict[str, str]:
        return {"name": self._config.key_name, "curve": self._config.curve}

    async def public_key(self, context: bytes) -> bytes:
        body = {"context": context.hex(), "key_id": self._key_id}
        data = await self._post("/public-key", body, "Failed to get public key")
        return self._decode(data, "public_key", "Failed to get public key")

    async def derive_key(
        self,
        context: bytes,
        input: bytes,
        transport_public_key: bytes,
    ) -> bytes:
        body = {
            "context": context.hex(),
            "input": input.hex(),
            "transport_public_key": transport_public_key.hex(),
            "key_id": self._key_id,
        }
        data = await self._post("/derive-key", body, "Failed to derive key")
        return self._decode(data, "encrypted_key", "Failed to derive key")

    async def _post(self, path: str, body: dict[str, Any], failure: str) -> dict[str, Any]:
        url = f"{self._config.url.rstrip('/')}{path}"
        try:
            response = await self._http.post(url, json=body, timeout=self._config.timeout)
        except httpx.RequestError as e:
            logger.warning("Key service request failed: %s %s", url, e)
            raise KeyServiceError(f"{failure}: {e!r}") from e

        if response.status_code != 200:
            logger.error(
                "Key service error: status=%d, body=%s",
                response.status_code,
                response.text,
            )
            raise KeyServiceError(f"{failure}: {response.status_code} {response.text}")

        try:
            data = response.json()
        except ValueError as e:
            raise KeyServiceError(f"{failure}: malformed response") from e
        if not isinstance(data, dict):
            raise KeyServiceError(f"{failure}: malformed response")
        return data

    @staticmethod
    def _decode(data: dict[str, Any], field: str, failure: str) -> bytes:
        value = data.get(field)
        if not isinstance(value, str):
            raise KeyServiceError(f"{failure}: response missing '{field}'")
        try:
            return bytes.fromhex(value)
        except ValueError as e:
            raise KeyServiceError(f"{failure}: '{field}' is not hex") from e
