from __future__ import annotations

import os
from dataclasses import dataclass

from fogwar.common.constants import DEFAULT_DISTANCE_METRIC, GRID_HEIGHT, GRID_WIDTH


def _env_bool(value: str | None, default: bool = True) -> bool:
    if value is None:
        return default
    return value.strip().lower() not in {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    """Runtime settings loaded from environment variables.

    Only defaults live here; grids and fog maps always accept explicit
    arguments that win over these values.
    """

    distance_metric: str = os.getenv("FOGWAR_DISTANCE_METRIC", DEFAULT_DISTANCE_METRIC)
    grid_width: int = int(os.getenv("FOGWAR_GRID_WIDTH", str(GRID_WIDTH)))
    grid_height: int = int(os.getenv("FOGWAR_GRID_HEIGHT", str(GRID_HEIGHT)))
    log_sweeps: bool = _env_bool(os.getenv("FOGWAR_LOG_SWEEPS", "0"))


settings = Settings()
