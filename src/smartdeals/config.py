"""Application configuration via environment variables.

Uses pydantic-settings to load config from env vars with SMARTDEALS_ prefix.
No YAML files, no file-based config. Just env vars (12-factor app style).

Learn: Two auth modes are supported. A shared secret (HS256) is enough
for local development and tests. In production the identity provider
signs ID tokens with rotating RSA keys published as a JWKS document, so
set SMARTDEALS_AUTH_JWKS_URL (plus issuer/audience) instead.
"""

from typing import Optional

from pydantic import model_validator
from pydantic_settings import BaseSettings

DEFAULT_AUTH_SECRET = "change-me-in-production"


class Settings(BaseSettings):
    """All app configuration. Set via SMARTDEALS_* env vars."""

    # MongoDB
    mongodb_uri: str = "mongodb://localhost:27017"
    database_name: str = "SimpleDealsDB"
    mongodb_timeout_ms: int = 5000  # server selection timeout

    # Auth (ID token verification)
    auth_secret: str = DEFAULT_AUTH_SECRET
    auth_algorithm: str = "HS256"
    auth_jwks_url: Optional[str] = None
    auth_issuer: Optional[str] = None
    auth_audience: Optional[str] = None
    dev_token_expire_minutes: int = 60

    # Server
    environment: str = "development"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 3030

    # CORS
    cors_origins: list[str] = ["*"]

    model_config = {"env_prefix": "SMARTDEALS_"}

    @model_validator(mode="after")
    def validate_production_settings(self):
        """Refuse to run outside development with the placeholder secret."""
        if (
            self.environment != "development"
            and not self.auth_jwks_url
            and self.auth_secret == DEFAULT_AUTH_SECRET
        ):
            raise ValueError(
                "Set SMARTDEALS_AUTH_JWKS_URL (identity provider keys) or a "
                "secure SMARTDEALS_AUTH_SECRET in non-development environments."
            )
        return self


# Singleton: import this everywhere
settings = Settings()
