"""Timelock REST routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from vault.domain.keys.model.value import TransportKey
from vault.domain.timelock.command.create import (
    CreateTimelockMessage,
    CreateTimelockMessageHandler,
    TimelockCreated,
)
from vault.domain.timelock.command.decryption_key import (
    GetTimelockDecryptionKey,
    GetTimelockDecryptionKeyHandler,
    TimelockDecryptionKey,
)
from vault.domain.timelock.command.update_content import (
    TimelockContentUpdated,
    UpdateTimelockContent,
    UpdateTimelockContentHandler,
)
from vault.domain.timelock.query.get_content import (
    GetTimelockContent,
    GetTimelockContentHandler,
    TimelockContent,
)
from vault.domain.timelock.query.get_identity import (
    GetTimelockIdentity,
    GetTimelockIdentityHandler,
    TimelockIdentity,
)
from vault.domain.timelock.query.list_mine import (
    ListMyTimelocks,
    ListMyTimelocksHandler,
    TimelockList,
)
from vault.domain.timelock.model.value import TimelockId

router = APIRouter(prefix="/timelocks", tags=["Timelocks"], route_class=DishkaRoute)


class ContentBody(BaseModel):
    content: str


class TransportKeyBody(BaseModel):
    transport_public_key: TransportKey


@router.post("", response_model=TimelockCreated, status_code=201)
async def create_timelock_message(
    body: CreateTimelockMessage,
    handler: FromDishka[CreateTimelockMessageHandler],
) -> TimelockCreated:
    return await handler.run(body)


@router.get("", response_model=TimelockList)
async def get_my_timelocks(
    handler: FromDishka[ListMyTimelocksHandler],
) -> TimelockList:
    return await handler.run(ListMyTimelocks())


@router.get("/{timelock_id:path}/content", response_model=TimelockContent)
async def get_timelock_content(
    timelock_id: str,
    handler: FromDishka[GetTimelockContentHandler],
) -> TimelockContent:
    return await handler.run(GetTimelockContent(id=TimelockId(timelock_id)))


@router.put("/{timelock_id:path}/content", response_model=TimelockContentUpdated)
async def update_timelock_content(
    timelock_id: str,
    body: ContentBody,
    handler: FromDishka[UpdateTimelockContentHandler],
) -> TimelockContentUpdated:
    return await handler.run(
        UpdateTimelockContent(id=TimelockId(timelock_id), content=body.content)
    )


@router.get("/{timelock_id:path}/identity", response_model=TimelockIdentity)
async def get_timelock_identity(
    timelock_id: str,
    handler: FromDishka[GetTimelockIdentityHandler],
) -> TimelockIdentity:
    return await handler.run(GetTimelockIdentity(id=TimelockId(timelock_id)))


@router.post("/{timelock_id:path}/decryption-key", response_model=TimelockDecryptionKey)
async def get_timelock_decryption_key(
    timelock_id: str,
    body: TransportKeyBody,
    handler: FromDishka[GetTimelockDecryptionKeyHandler],
) -> TimelockDecryptionKey:
    return await handler.run(
        GetTimelockDecryptionKey(
            id=TimelockId(timelock_id),
            transport_public_key=body.transport_public_key,
        )
    )
