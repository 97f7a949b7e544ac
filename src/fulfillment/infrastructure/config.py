"""Application settings.

Values come from environment variables prefixed ``FULFILLMENT_`` (for
example ``FULFILLMENT_DATA_DIR``) or from a ``.env`` file in the working
directory.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# When installed in editable mode the project root is the repo root.
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


class Settings(BaseSettings):
    """Runtime configuration for the CLI and its adapters."""

    model_config = SettingsConfigDict(
        env_prefix="FULFILLMENT_",
        env_file=".env",
        extra="ignore",
    )

    data_dir: Path = _PROJECT_ROOT / "data"
    log_level: str = "INFO"

    @property
    def products_file(self) -> Path:
        return self.data_dir / "products.json"

    @property
    def orders_file(self) -> Path:
        return self.data_dir / "orders.json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
