from typing import Any

from vault.domain.timelock.model.aggregate import TimelockRecord
from vault.domain.timelock.model.value import TimelockId


def timelock_to_dict(record: TimelockRecord) -> dict[str, Any]:
    return {
        "id": str(record.id),
        "creator": record.creator,
        "title": record.title,
        "content": record.content,
        "unlock_time": record.unlock_time,
        "release_identity": record.release_identity,
    }


def row_to_timelock(row: dict[str, Any]) -> TimelockRecord:
    return TimelockRecord(
        id=TimelockId(row["id"]),
        creator=row["creator"],
        title=row["title"],
        content=row["content"],
        unlock_time=row["unlock_time"],
        release_identity=row["release_identity"],
    )
