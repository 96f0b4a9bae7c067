"""Domain entity — one row of a tenant's synced client partition."""

from dataclasses import dataclass


@dataclass
class ClientRecord:
    """A client row owned by exactly one tenant.

    Rows are never edited one by one: the whole partition for a
    ``client_id`` is swapped by a replace-sync.
    """

    client_id: str
    code: str | None = None
    name: str | None = None
    address: str | None = None
    branch: str | None = None
    id: int | None = None
