"""Process settings, populated by the CLI from options or environment."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:
    data_dir: Path = DEFAULT_DATA_DIR
    payment_base_url: str | None = None
    payment_timeout: float = 2.0

    @property
    def orders_file(self) -> Path:
        return self.data_dir / "orders.json"
