import logging

from vault.domain.auth.model.identity import Identity, Principal
from vault.domain.keys.model.value import KeyContext, KeyResponse
from vault.domain.keys.port.key_service import KeyService
from vault.domain.shared.service import Service

logger = logging.getLogger(__name__)


class KeyContextService(Service):
    """Stateless pass-through to the key service for one derivation context at a time."""

    key_service: KeyService

    async def get_public_parameters(self, context: KeyContext, caller: Identity) -> KeyResponse:
        public_key = await self.key_service.public_key(context.value)
        return KeyResponse(key_hex=public_key.hex(), caller=caller.text)

    async def derive_key_for_caller(
        self,
        context: KeyContext,
        caller: Principal,
        transport_public_key: bytes,
    ) -> KeyResponse:
        """Derive key material bound to the caller's own identity."""
        return await self.derive_key(context, caller.as_bytes(), transport_public_key, caller)

    async def derive_key(
        self,
        context: KeyContext,
        input: bytes,
        transport_public_key: bytes,
        caller: Identity,
    ) -> KeyResponse:
        logger.debug("Deriving key: context=%s, caller=%s", context.name, caller.text)
        encrypted_key = await self.key_service.derive_key(
            context.value, input, transport_public_key
        )
        return KeyResponse(key_hex=encrypted_key.hex(), caller=caller.text)
