"""Unit tests for configuration management."""

import os
from unittest.mock import patch

from secret_protection.config import Settings


def test_settings_default_values():
    """Test that Settings loads with empty secrets and default logging."""
    settings = Settings(_env_file=None)

    assert settings.public_id_secret == ""
    assert settings.billing_secrets_key == ""
    assert settings.tax_authority_secrets_key == ""
    assert settings.log_level == "INFO"
    assert settings.log_format_json is True
    assert settings.environment == "development"


def test_settings_from_primary_environment_names():
    """Test that each secret is read from its primary variable."""
    env_vars = {
        "PUBLIC_ID_SECRET": "public",
        "BILLING_SECRETS_KEY": "billing",
        "ARCA_SECRETS_KEY": "arca",
        "LOG_LEVEL": "DEBUG",
    }

    with patch.dict(os.environ, env_vars, clear=False):
        settings = Settings(_env_file=None)

        assert settings.public_id_secret == "public"
        assert settings.billing_secrets_key == "billing"
        assert settings.tax_authority_secrets_key == "arca"
        assert settings.log_level == "DEBUG"


def test_settings_fallback_environment_names():
    """Test that legacy variable names are used when primaries are absent."""
    env_vars = {
        "JWT_SECRET": "jwt",
        "BILLING_SECRETS_KEY_B64": "billing-b64",
        "AFIP_SECRET_KEY": "afip",
    }

    with patch.dict(os.environ, env_vars, clear=False):
        settings = Settings(_env_file=None)

        assert settings.public_id_secret == "jwt"
        assert settings.billing_secrets_key == "billing-b64"
        assert settings.tax_authority_secrets_key == "afip"


def test_settings_primary_name_wins_over_fallback():
    """Test that the primary variable takes precedence."""
    env_vars = {"PUBLIC_ID_SECRET": "public", "JWT_SECRET": "jwt"}

    with patch.dict(os.environ, env_vars, clear=False):
        settings = Settings(_env_file=None)

        assert settings.public_id_secret == "public"


def test_settings_read_env_file(tmp_path):
    """Test that secrets can come from a .env file."""
    env_file = tmp_path / ".env"
    env_file.write_text("PUBLIC_ID_SECRET=from-file\nAFIP_SECRET_KEY=afip-file\n", encoding="utf-8")

    settings = Settings(_env_file=env_file)

    assert settings.public_id_secret == "from-file"
    assert settings.tax_authority_secrets_key == "afip-file"


def test_settings_blank_primary_uses_fallback():
    """Test that an empty or blank primary variable falls through to the legacy name."""
    env_vars = {
        "PUBLIC_ID_SECRET": "",
        "JWT_SECRET": "jwt",
        "BILLING_SECRETS_KEY": "   ",
        "BILLING_SECRETS_KEY_B64": "billing-b64",
        "ARCA_SECRETS_KEY": "",
        "AFIP_SECRET_KEY": "afip",
    }

    with patch.dict(os.environ, env_vars, clear=False):
        settings = Settings(_env_file=None)

        assert settings.public_id_secret == "jwt"
        assert settings.billing_secrets_key == "billing-b64"
        assert settings.tax_authority_secrets_key == "afip"


def test_settings_blank_primary_in_env_file_uses_fallback(tmp_path):
    """Test that `PUBLIC_ID_SECRET=` in a .env file does not hide JWT_SECRET."""
    env_file = tmp_path / ".env"
    env_file.write_text("PUBLIC_ID_SECRET=\nJWT_SECRET=jwt-file\n", encoding="utf-8")

    settings = Settings(_env_file=env_file)

    assert settings.public_id_secret == "jwt-file"
