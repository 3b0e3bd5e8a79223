"""Token service for caller identity JWTs."""

import logging
import secrets
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt

from vault.config import JwtConfig
from vault.domain.auth.model.identity import Anonymous, Identity, Principal
from vault.domain.shared.service import Service

logger = logging.getLogger(__name__)


class TokenService(Service):
    """Issues and validates HS256 access tokens whose ``sub`` is the caller identity."""

    _config: JwtConfig

    def create_access_token(self, identity: str) -> str:
        now = datetime.now(UTC)
        expires_at = now + timedelta(minutes=self._config.access_token_expire_minutes)

        payload = {
            "sub": identity,
            "aud": "authenticated",
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
            "jti": secrets.token_hex(16),
        }
        return jwt.encode(payload, self._config.secret, algorithm=self._config.algorithm)

    def validate_access_token(self, token: str) -> dict[str, Any]:
        """Decode a token, raising jwt.PyJWTError (or a subclass) if it cannot be trusted."""
        return jwt.decode(
            token,
            self._config.secret,
            algorithms=[self._config.algorithm],
            audience="authenticated",
        )

    def resolve_identity(self, authorization: str | None) -> Identity:
        """Resolve an Authorization header into a Principal, or Anonymous."""
        if not authorization or not authorization.startswith("Bearer "):
            return Anonymous()

        token = authorization[7:]  # Remove "Bearer " prefix
        try:
            payload = self.validate_access_token(token)
        except jwt.PyJWTError as e:
            logger.debug("Rejected bearer token: %s", e)
            return Anonymous()

        subject = payload.get("sub")
        if not subject:
            return Anonymous()
        return Principal(identity=subject)
