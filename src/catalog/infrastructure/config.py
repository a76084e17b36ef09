"""Runtime configuration, read from environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class CatalogConfig:
    """Settings for the catalog adapters.

    - ``data_dir``: directory holding ``products.json``
    - ``log_level``: standard logging level name
    - ``default_currency``: used when the CLI is not given ``--currency``
    """

    data_dir: Path = Path("data")
    log_level: str = "WARNING"
    default_currency: str = "USD"

    @classmethod
    def from_env(cls) -> CatalogConfig:
        """Create configuration from environment variables."""
        log_level = os.getenv("CATALOG_LOG_LEVEL", "WARNING").strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"Unknown log level in CATALOG_LOG_LEVEL: {log_level!r}")

        currency = os.getenv("CATALOG_DEFAULT_CURRENCY", "USD").strip().upper()
        if not currency:
            raise ValueError("CATALOG_DEFAULT_CURRENCY cannot be empty")

        return cls(
            data_dir=Path(os.getenv("CATALOG_DATA_DIR", "data")),
            log_level=log_level,
            default_currency=currency,
        )

    @property
    def products_file(self) -> Path:
        return self.data_dir / "products.json"


def configure_logging(config: CatalogConfig) -> None:
    logging.basicConfig(level=config.log_level, format=LOG_FORMAT)
