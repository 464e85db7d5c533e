"""Bearer token issuance, verification and role gating."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from marketplace.core.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()
bearer_scheme = HTTPBearer(auto_error=False)

ROLE_USER = "user"
ROLE_ADMIN = "admin"
ROLES = frozenset({ROLE_USER, ROLE_ADMIN})


class AuthenticationError(Exception):
    """Raised when a bearer credential is missing, malformed, expired or forged."""


class AuthorizationError(Exception):
    """Raised when an authenticated identity lacks the required role."""


class PreconditionFailedError(Exception):
    """Raised when a role check runs without a verified identity."""


@dataclass(frozen=True, slots=True)
class Identity:
    subject_id: str
    role: str

    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN


def create_access_token(
    subject_id: str,
    role: str,
    expires_delta: Optional[timedelta] = None,
    *,
    secret_key: Optional[str] = None,
    algorithm: Optional[str] = None,
) -> str:
    expire_delta = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    payload = {
        "sub": subject_id,
        "role": role,
        "exp": datetime.now(timezone.utc) + expire_delta,
    }
    return jwt.encode(
        payload,
        secret_key or settings.secret_key,
        algorithm=algorithm or settings.algorithm,
    )


def verify_token(
    token: Optional[str],
    *,
    secret_key: Optional[str] = None,
    algorithm: Optional[str] = None,
) -> Identity:
    """Validate signature and expiry of ``token`` and return the embedded identity.

    Every failure mode surfaces as :class:`AuthenticationError`.
    """
    if not token:
        raise AuthenticationError("Not authenticated")

    try:
        payload = jwt.decode(
            token,
            secret_key or settings.secret_key,
            algorithms=[algorithm or settings.algorithm],
            options={"require_exp": True, "require_sub": True},
        )
    except JWTError as exc:
        logger.debug("Bearer token rejected: %s", exc)
        raise AuthenticationError("Invalid or expired token") from exc

    subject_id = payload.get("sub")
    role = payload.get("role")
    if not subject_id or role not in ROLES:
        raise AuthenticationError("Invalid or expired token")
    return Identity(subject_id=str(subject_id), role=role)


def require_admin(identity: Optional[Identity]) -> Identity:
    if identity is None:
        raise PreconditionFailedError("Role check requires a verified identity")
    if not identity.is_admin():
        logger.info("Admin access denied for %s (role=%s)", identity.subject_id, identity.role)
        raise AuthorizationError("You are not authorised to perform this action")
    return identity


async def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Identity:
    token = credentials.credentials if credentials is not None else None
    try:
        return verify_token(token)
    except AuthenticationError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc


async def get_current_admin(identity: Identity = Depends(get_current_identity)) -> Identity:
    try:
        return require_admin(identity)
    except AuthorizationError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)) from exc
