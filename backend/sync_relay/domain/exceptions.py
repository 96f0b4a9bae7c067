"""Domain-specific exceptions — framework-independent."""


class InvalidRequestError(Exception):
    """Raised when a caller omits or malforms a required input."""

    def __init__(self, message: str = "Missing required fields"):
        self.message = message
        super().__init__(message)


class InvalidCredentialsError(Exception):
    """Raised when a client id / access token pair matches no tenant.

    Unknown client ids and wrong tokens share this error and message so that
    callers cannot probe which client ids exist.
    """

    message = "Invalid client ID or access token"

    def __init__(self, client_id: str):
        self.client_id = client_id
        super().__init__(self.message)


class StoreError(Exception):
    """Raised when the relational store cannot be reached or a statement fails."""


class SyncFailedError(Exception):
    """Raised when a replace-sync fails after authentication.

    The partition has been rolled back to its previous contents by the time
    this is raised.
    """

    def __init__(self, client_id: str, reason: str):
        self.client_id = client_id
        self.reason = reason
        super().__init__(f"Replace-sync for client '{client_id}' failed: {reason}")
