"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, clientbook.toml only contains
overrides. A fresh install needs no config file at all.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel

# --- clientbook.toml sections ---


class StorageConfig(BaseModel):
    """[storage] section."""

    model_config = {"frozen": True}

    data_file: Path = Path("data/clientbook.json")
    autosave: bool = True


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    width: int = 120
