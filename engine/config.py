"""engine.config

Engine configuration passed from UI.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_STORE_PATH = "data/grow_or_die.json"


@dataclass(frozen=True)
class EngineConfig:
    base_seed: int = 42
    store_path: str = DEFAULT_STORE_PATH
