"""Domain entities for sync tenants and the credentials delegated to them."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DatabaseCredentials:
    """Downstream database login handed to an authenticated tenant.

    Deliberately carries only the user/password pair; connection details of
    the delegation target stay on the server.
    """

    db_user: str | None
    db_password: str | None


@dataclass
class Tenant:
    """A registered sync client, provisioned out-of-band and read-only here."""

    client_id: str
    access_token: str
    db_user: str | None = None
    db_password: str | None = None

    @property
    def credentials(self) -> DatabaseCredentials:
        return DatabaseCredentials(db_user=self.db_user, db_password=self.db_password)

    def __repr__(self) -> str:
        return f"Tenant(client_id={self.client_id!r})"
