from pydantic import BaseModel

from vault.domain.auth.model.identity import Principal
from vault.domain.shared.error import AccessDeniedError, NotYetUnlockableError
from vault.domain.timelock.model.value import TimelockId, TimelockSummary


class TimelockRecord(BaseModel):
    """A message sealed until ``unlock_time``.

    Everything but ``content`` is fixed at creation. ``content`` starts as
    whatever the creator submitted and is later replaced with IBE ciphertext
    produced against ``release_identity``.
    """

    id: TimelockId
    creator: str
    title: str
    content: str
    unlock_time: int
    release_identity: str

    @classmethod
    def create(
        cls,
        id: TimelockId,
        creator: Principal,
        title: str,
        content: str,
        unlock_time: int,
    ) -> "TimelockRecord":
        return cls(
            id=id,
            creator=creator.identity,
            title=title.strip(),
            content=content,
            unlock_time=unlock_time,
            release_identity=id.release_identity(),
        )

    def is_owned_by(self, caller: Principal) -> bool:
        return self.creator == caller.identity

    def require_creator(self, caller: Principal) -> None:
        if not self.is_owned_by(caller):
            raise AccessDeniedError()

    def is_unlockable(self, now: int) -> bool:
        return now >= self.unlock_time

    def require_unlockable(self, now: int) -> None:
        if not self.is_unlockable(now):
            raise NotYetUnlockableError()

    def replace_content(self, content: str) -> None:
        self.content = content

    def summarize(self, now: int) -> TimelockSummary:
        return TimelockSummary(
            id=self.id,
            title=self.title,
            unlock_time=self.unlock_time,
            is_expired=self.is_unlockable(now),
        )
