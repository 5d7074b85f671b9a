# storefront/utils/errors.py


class StoreError(Exception):
    """Backing database failure other than an expected empty lookup."""


class DuplicateKeyError(StoreError):
    """Unique constraint violation on insert."""


class GatewayError(Exception):
    """Payment gateway call failed (network or gateway side)."""


class IdentityError(Exception):
    """Identity provider rejected the request."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
