"""Domain entity — append-only audit entry describing a sync outcome."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class SyncStatus(str, Enum):
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"


@dataclass
class SyncLogEntry:
    """Immutable once written.

    ``status`` is a plain string: entries written by the replace-sync use
    :class:`SyncStatus`, while clients reporting through ``/sync/log`` may
    record any non-empty status.
    """

    client_id: str
    status: str
    records_synced: int = 0
    message: str = ""
    id: int | None = None
    created_at: datetime | None = None
