"""ID token verification.

Learn: The identity provider (e.g. Firebase Auth) signs short-lived ID
tokens for signed-in users. Verifying one is all-or-nothing: signature,
expiry, issuer, audience and an email claim must all check out or the
caller is Unauthorized. The exact failure is logged but never returned,
so probing can't tell an expired token from a forged one.

Two key sources:
- JWKS URL → RS256 keys fetched (and cached by PyJWKClient) from the provider
- Shared secret → HS256, for local development and tests
"""

import asyncio
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Optional, Protocol

import jwt

from smartdeals.config import Settings
from smartdeals.errors import Unauthorized


@dataclass(frozen=True)
class Principal:
    """A verified caller identity."""

    email: str
    uid: Optional[str] = None
    claims: dict = field(default_factory=dict, compare=False, repr=False)


class IdentityVerifier(Protocol):
    async def verify(self, token: str) -> Principal: ...


class JWTIdentityVerifier:
    """Verify signed ID tokens with PyJWT."""

    def __init__(
        self,
        *,
        secret: Optional[str] = None,
        algorithm: str = "HS256",
        jwks_url: Optional[str] = None,
        issuer: Optional[str] = None,
        audience: Optional[str] = None,
    ):
        if not secret and not jwks_url:
            raise ValueError("either a secret or a JWKS URL is required")
        self.secret = secret
        self.issuer = issuer
        self.audience = audience
        self._jwks_client = jwt.PyJWKClient(jwks_url) if jwks_url else None
        self.algorithms = ["RS256"] if jwks_url else [algorithm]

    async def verify(self, token: str) -> Principal:
        if not token:
            raise Unauthorized("empty token")
        try:
            if self._jwks_client:
                # PyJWKClient fetches keys over blocking HTTP
                claims = await asyncio.to_thread(self._decode_with_jwks, token)
            else:
                claims = self._decode(token, self.secret)
        except jwt.ExpiredSignatureError:
            raise Unauthorized("token has expired")
        except jwt.PyJWTError as e:
            raise Unauthorized(f"invalid token: {e}")

        email = claims.get("email")
        if not email:
            raise Unauthorized("token carries no email claim")
        return Principal(email=email, uid=claims.get("sub"), claims=claims)

    def _decode_with_jwks(self, token: str) -> dict:
        signing_key = self._jwks_client.get_signing_key_from_jwt(token)
        return self._decode(token, signing_key.key)

    def _decode(self, token: str, key) -> dict:
        return jwt.decode(
            token,
            key,
            algorithms=self.algorithms,
            issuer=self.issuer,
            audience=self.audience,
            options={
                "require": ["exp", "iat"],
                "verify_aud": self.audience is not None,
            },
        )


def build_verifier(settings: Settings) -> JWTIdentityVerifier:
    return JWTIdentityVerifier(
        secret=settings.auth_secret,
        algorithm=settings.auth_algorithm,
        jwks_url=settings.auth_jwks_url,
        issuer=settings.auth_issuer,
        audience=settings.auth_audience,
    )


def create_id_token(
    email: str,
    settings: Settings,
    uid: Optional[str] = None,
    expires_minutes: Optional[int] = None,
) -> str:
    """Mint an HS256 ID token with the shared secret (development only)."""
    if settings.auth_jwks_url:
        raise ValueError("tokens can't be minted locally in JWKS mode")
    now = datetime.now(timezone.utc)
    payload = {
        "sub": uid or email,
        "email": email,
        "iat": now,
        "exp": now + timedelta(
            minutes=expires_minutes or settings.dev_token_expire_minutes
        ),
    }
    if settings.auth_issuer:
        payload["iss"] = settings.auth_issuer
    if settings.auth_audience:
        payload["aud"] = settings.auth_audience
    return jwt.encode(payload, settings.auth_secret, algorithm=settings.auth_algorithm)
