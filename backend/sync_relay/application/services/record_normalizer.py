"""Normalisation of raw client rows pushed to ``/sync/data``."""

from collections.abc import Mapping
from typing import Any

from sync_relay.domain.entities import ClientRecord
from sync_relay.domain.exceptions import InvalidRequestError

RECORD_FIELDS = ("code", "name", "address", "branch")


def _pick(raw: Mapping[str, Any], field: str) -> str | None:
    # Upper-case key first; None and "" fall through to the lower-case key.
    for key in (field.upper(), field):
        value = raw.get(key)
        if value is not None and value != "":
            return value if isinstance(value, str) else str(value)
    return None


def normalize_record(raw: Mapping[str, Any], client_id: str) -> ClientRecord:
    """Build a ClientRecord for ``client_id`` from one raw row.

    Each field is read from its upper-case key (``CODE``) or lower-case key
    (``code``), upper-case winning when both carry a value. Missing fields
    are stored as NULL; non-string scalars are stringified.
    """
    if not isinstance(raw, Mapping):
        raise InvalidRequestError("Each data row must be an object")
    return ClientRecord(client_id=client_id, **{f: _pick(raw, f) for f in RECORD_FIELDS})
