import secrets
from typing import Optional

from fastapi import Depends, Header

from host_status.config import Settings, get_settings


class UnauthorizedError(Exception):
    """Raised when a request does not carry the configured bearer token."""


def require_bearer_token(
    authorization: Optional[str] = Header(None),
    settings: Settings = Depends(get_settings),
) -> None:
    """
    Compare the Authorization header with 'Bearer <configured token>'.

    The comparison runs in constant time; any mismatch, including a missing
    header, raises UnauthorizedError, which the app maps to HTTP 401.
    """
    if authorization is None:
        raise UnauthorizedError()

    expected = f"Bearer {settings.bearer_token}"
    if not secrets.compare_digest(
        authorization.encode("utf-8"), expected.encode("utf-8")
    ):
        raise UnauthorizedError()
