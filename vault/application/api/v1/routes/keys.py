"""Key context REST routes: master public keys and caller-bound derived keys."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from vault.application.api.v1.routes.timelocks import TransportKeyBody
from vault.domain.keys.command.derive_key import (
    CallerKeyDerived,
    DeriveCallerKey,
    DeriveCallerKeyHandler,
)
from vault.domain.keys.command.public_key import (
    FetchPublicKey,
    FetchPublicKeyHandler,
    PublicKeyFetched,
)
from vault.domain.keys.model.value import CallerKeyContext
from vault.domain.timelock.command.encryption_key import (
    GetTimelockEncryptionKey,
    GetTimelockEncryptionKeyHandler,
    TimelockEncryptionKey,
)

router = APIRouter(prefix="/keys", tags=["Keys"], route_class=DishkaRoute)


@router.post("/timelock/encryption-key", response_model=TimelockEncryptionKey)
async def timelock_encryption_key(
    handler: FromDishka[GetTimelockEncryptionKeyHandler],
) -> TimelockEncryptionKey:
    return await handler.run(GetTimelockEncryptionKey())


@router.post("/symmetric/verification-key", response_model=PublicKeyFetched)
async def symmetric_key_verification_key(
    handler: FromDishka[FetchPublicKeyHandler],
) -> PublicKeyFetched:
    return await handler.run(FetchPublicKey(context=CallerKeyContext.SYMMETRIC))


@router.post("/symmetric/encrypted-key", response_model=CallerKeyDerived)
async def encrypted_symmetric_key_for_caller(
    body: TransportKeyBody,
    handler: FromDishka[DeriveCallerKeyHandler],
) -> CallerKeyDerived:
    return await handler.run(
        DeriveCallerKey(
            context=CallerKeyContext.SYMMETRIC,
            transport_public_key=body.transport_public_key,
        )
    )


@router.post("/ibe/encryption-key", response_model=PublicKeyFetched)
async def ibe_encryption_key(
    handler: FromDishka[FetchPublicKeyHandler],
) -> PublicKeyFetched:
    return await handler.run(FetchPublicKey(context=CallerKeyContext.IBE))


@router.post("/ibe/encrypted-key", response_model=CallerKeyDerived)
async def encrypted_ibe_decryption_key_for_caller(
    body: TransportKeyBody,
    handler: FromDishka[DeriveCallerKeyHandler],
) -> CallerKeyDerived:
    return await handler.run(
        DeriveCallerKey(
            context=CallerKeyContext.IBE,
            transport_public_key=body.transport_public_key,
        )
    )
