"""Pydantic DTOs (Data Transfer Objects) for the relay endpoints.

Request fields are optional at the schema level: presence is checked by the
services so that a missing field yields the relay's own 400 message. Only
wrongly-typed JSON is rejected here.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CredentialsRequest(_CamelModel):
    """Body of ``POST /auth/credentials``."""

    client_id: str | None = Field(None, examples=["client-001"])
    access_token: str | None = None


class CredentialsResponse(_CamelModel):
    db_user: str | None
    db_password: str | None


class SyncDataRequest(_CamelModel):
    """Body of ``POST /sync/data``."""

    client_id: str | None = None
    access_token: str | None = None
    data: list[dict[str, Any]] | None = Field(
        None,
        examples=[[{"CODE": "A1", "NAME": "Acme", "ADDRESS": "1 Main St", "BRANCH": "HQ"}]],
    )


class SyncDataResponse(_CamelModel):
    success: bool = True
    message: str
    record_count: int


class SyncLogRequest(_CamelModel):
    """Body of ``POST /sync/log``."""

    client_id: str | None = None
    access_token: str | None = None
    status: str | None = Field(None, examples=["SUCCESS"])
    record_count: int | None = None
    message: str | None = None


class SyncLogResponse(BaseModel):
    success: bool = True


class ErrorResponse(BaseModel):
    error: str
