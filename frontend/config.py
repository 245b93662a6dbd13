"""
Frontend configuration.

Loads Kinetica frontend settings from the environment.
Safely ignores unrelated environment variables.
"""

from typing import Optional

from pydantic_settings import BaseSettings
from pydantic import ConfigDict, Field


class Settings(BaseSettings):
    """
    Frontend application settings.

    Environment variables must be prefixed with:
        KINETICA_

    Example:
        KINETICA_STORAGE_SECRET=change-me
    """

    # --------------------
    # Environment
    # --------------------
    ENV: str = "dev"
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # --------------------
    # Storage
    # --------------------
    STORAGE_SECRET: str = Field(
        default="dev-secret",
        description="Secret used to sign the browser storage id",
        min_length=1,
    )

    # --------------------
    # Cookie consent
    # --------------------
    CONSENT_STORAGE_KEY: str = Field(default="cookieConsent", min_length=1)
    CONSENT_BANNER_DELAY_SECONDS: float = Field(default=1.0, ge=0)
    PRIVACY_POLICY_PATH: str = "/privacy-policy"

    # --------------------
    # Third-party tags (loaded only with consent)
    # --------------------
    ANALYTICS_MEASUREMENT_ID: Optional[str] = None
    MARKETING_PIXEL_ID: Optional[str] = None

    # --------------------
    # Error tracking
    # --------------------
    SENTRY_DSN: Optional[str] = None

    # --------------------
    # Studio
    # --------------------
    STUDIO_NAME: str = "Kinetica"
    STUDIO_ADDRESS: str = "Via Giovanni Tommaso Invrea 20/2, 16129 Genova (GE)"
    STUDIO_PHONE: str = "010 817 6855"
    STUDIO_EMAIL: str = "amministrazione.kinetica@gmail.com"

    # IMPORTANT:
    # - env_file allows local development
    # - extra='ignore' safely ignores unrelated variables
    model_config = ConfigDict(
        env_file=".env",
        env_prefix="KINETICA_",
        extra="ignore",
    )


settings = Settings()
