"""Application configuration using pydantic-settings.

Holds the seed phrase and derivation policy for the configured wallet.
The derivation core itself never reads settings.
"""

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from slipkey.hdwallet.path import parse_path

DEFAULT_PATH_TEMPLATE = "m/44'/501'/{index}'/0'"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # HD Wallet
    # ======================
    wallet_seed_phrase: Optional[str] = Field(
        default=None, description="BIP-39 12/24 word seed phrase for HD derivation"
    )
    wallet_passphrase: str = Field(default="", description="Optional BIP-39 passphrase")
    derivation_path_template: str = Field(
        default=DEFAULT_PATH_TEMPLATE,
        description="Per-account derivation path with an {index} placeholder",
    )
    strict_hardened_paths: bool = Field(
        default=False,
        description="Reject path segments without an explicit hardening suffix",
    )

    # ======================
    # Logging
    # ======================
    log_level: str = Field(default="INFO", description="Root log level")

    @field_validator("derivation_path_template")
    @classmethod
    def _check_path_template(cls, value: str) -> str:
        if "{index}" not in value:
            raise ValueError("derivation_path_template must contain {index}")
        try:
            value.format(index=0)
        except (KeyError, IndexError, ValueError) as e:
            raise ValueError(f"derivation_path_template has an unknown placeholder: {e}")
        return value

    @model_validator(mode="after")
    def _check_template_policy(self) -> "Settings":
        parse_path(
            self.derivation_path_template.format(index=0),
            strict=self.strict_hardened_paths,
        )
        return self

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @property
    def has_wallet(self) -> bool:
        """Check if wallet seed phrase is configured."""
        return bool(self.wallet_seed_phrase and len(self.wallet_seed_phrase.split()) >= 12)

    def get_safe_dict(self) -> dict:
        """Return settings dict with secrets redacted."""
        return {
            "wallet_seed_phrase": "***" if self.wallet_seed_phrase else "(not set)",
            "wallet_passphrase": "***" if self.wallet_passphrase else "(not set)",
            "wallet_configured": self.has_wallet,
            "derivation_path_template": self.derivation_path_template,
            "strict_hardened_paths": self.strict_hardened_paths,
            "log_level": self.log_level,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging at ``level`` (defaults to settings.log_level)."""
    logging.basicConfig(
        level=level or get_settings().log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
