"""Configuration management for the secret protection layer."""

from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# (primary field, legacy fallback field) per key domain secret
SECRET_FALLBACKS = (
    ("public_id_secret", "jwt_secret"),
    ("billing_secrets_key", "billing_secrets_key_b64"),
    ("tax_authority_secrets_key", "afip_secret_key"),
)


class Settings(BaseSettings):
    """Settings loaded from environment variables.

    Each key domain reads its secret from a primary variable and falls
    back to a legacy name when the primary is unset or blank. Empty
    secrets are accepted here and rejected by the key provider on first
    use.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Key domain secrets
    public_id_secret: str = Field(
        default="",
        description="Secret for public identifier tokens (PUBLIC_ID_SECRET)",
    )
    billing_secrets_key: str = Field(
        default="",
        description="Secret for billing credentials such as bank account codes",
    )
    tax_authority_secrets_key: str = Field(
        default="",
        validation_alias=AliasChoices("tax_authority_secrets_key", "ARCA_SECRETS_KEY"),
        description="Secret for tax authority certificates and passwords",
    )

    # Legacy names
    jwt_secret: str = Field(default="", description="Fallback for PUBLIC_ID_SECRET")
    billing_secrets_key_b64: str = Field(default="", description="Fallback for BILLING_SECRETS_KEY")
    afip_secret_key: str = Field(default="", description="Fallback for ARCA_SECRETS_KEY")

    # Service Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format_json: bool = Field(default=True, description="Render logs as JSON")
    environment: str = Field(default="development", description="Environment name")

    @model_validator(mode="after")
    def apply_secret_fallbacks(self) -> "Settings":
        """Use the legacy variable when the primary one is blank."""
        for primary, fallback in SECRET_FALLBACKS:
            if not getattr(self, primary).strip():
                setattr(self, primary, getattr(self, fallback))
        return self


# Global settings instance
settings = Settings()
