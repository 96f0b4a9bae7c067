"""Application service (use case) for disclosing delegated database credentials."""

from sync_relay.application.interfaces import StoreGateway
from sync_relay.domain.entities import DatabaseCredentials

from .tenant_authenticator import TenantAuthenticator
from .timeouts import with_timeout

MISSING_CREDENTIALS_MESSAGE = "Missing clientId or accessToken"


class CredentialService:
    """Returns a tenant's downstream db user/password, and nothing else."""

    def __init__(
        self,
        gateway: StoreGateway,
        authenticator: TenantAuthenticator,
        timeout: float | None = None,
    ):
        self._gateway = gateway
        self._authenticator = authenticator
        self._timeout = timeout

    async def disclose(
        self, client_id: str | None, access_token: str | None
    ) -> DatabaseCredentials:
        self._authenticator.require_credentials(
            client_id, access_token, MISSING_CREDENTIALS_MESSAGE
        )
        return await with_timeout(
            self._disclose(client_id, access_token),
            self._timeout,
            "credential lookup",
        )

    async def _disclose(self, client_id: str, access_token: str) -> DatabaseCredentials:
        async with self._gateway.connect() as store:
            tenant = await self._authenticator.authenticate(store, client_id, access_token)
        return tenant.credentials
