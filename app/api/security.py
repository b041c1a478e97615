"""Bearer-token authentication and per-route permission checks.

Routes compose these explicitly::

    user: AuthenticatedUser = Depends(require_permissions(USER_EQUIPMENT_READ))

``get_current_user`` rejects the request with ``AuthenticationError`` (401)
before any repository call; ``require_permissions`` additionally rejects with
``AuthorizationError`` (403) when a declared permission is missing.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any

import structlog
from fastapi import Depends, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from app.core.config import Settings, get_settings
from app.core.exceptions import AuthenticationError, AuthorizationError
from app.core.permissions import permissions_for_role

logger = structlog.get_logger(__name__)

bearer_scheme = HTTPBearer(auto_error=False, bearerFormat="JWT", scheme_name="JWT")


@dataclass(frozen=True, slots=True)
class AuthenticatedUser:
    uid: int
    role: str | None = None
    permissions: frozenset[str] = field(default_factory=frozenset)

    def effective_permissions(self) -> frozenset[str]:
        return self.permissions | permissions_for_role(self.role)


def create_access_token(
    uid: int,
    *,
    role: str | None = None,
    permissions: Iterable[str] = (),
    expires_in: timedelta | None = timedelta(hours=1),
    settings: Settings | None = None,
) -> str:
    settings = settings or get_settings()
    payload: dict[str, Any] = {"uid": uid, "permissions": sorted(permissions)}
    if role:
        payload["role"] = role
    if expires_in is not None:
        payload["exp"] = datetime.now(timezone.utc) + expires_in
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: Settings) -> AuthenticatedUser:
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError as exc:
        logger.warning("auth_token_rejected", reason=type(exc).__name__)
        raise AuthenticationError("Invalid token") from None

    uid = payload.get("uid")
    if isinstance(uid, str) and uid.isdigit():
        uid = int(uid)
    if isinstance(uid, bool) or not isinstance(uid, int) or uid <= 0:
        raise AuthenticationError("Invalid token claims")

    raw_permissions = payload.get("permissions") or []
    if not isinstance(raw_permissions, list):
        raise AuthenticationError("Invalid token claims")

    role = payload.get("role")
    return AuthenticatedUser(
        uid=uid,
        role=role if isinstance(role, str) else None,
        permissions=frozenset(str(p) for p in raw_permissions),
    )


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> AuthenticatedUser:
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Not authenticated")
    return decode_access_token(credentials.credentials, settings)


def require_permissions(*required: str) -> Callable[..., AuthenticatedUser]:
    """Build a dependency that authenticates and then checks ``required``."""
    needed = frozenset(required)

    def _check(user: AuthenticatedUser = Depends(get_current_user)) -> AuthenticatedUser:
        missing = needed - user.effective_permissions()
        if missing:
            logger.info("permission_denied", uid=user.uid, missing=sorted(missing))
            raise AuthorizationError(
                f"Insufficient permissions. Required: {', '.join(sorted(missing))}"
            )
        return user

    return _check


__all__ = [
    "AuthenticatedUser",
    "bearer_scheme",
    "create_access_token",
    "decode_access_token",
    "get_current_user",
    "require_permissions",
]
