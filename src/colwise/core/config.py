import json
import os
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field


def _default_config_path() -> Path:
    return Path(os.getenv("COLWISE_CONFIG", Path().home() / ".colwise.json"))


class Settings(BaseModel):
    SEED: int = 2024
    WEATHER_CSV: Optional[Path] = None
    WEATHER_ROWS: int = Field(1000, ge=1)
    NA_VALUES: List[str] = Field(default_factory=lambda: ["NA", ""])
    TIMING_N: int = Field(10_000, ge=0)
    TIMING_REPEATS: int = Field(3, ge=1)
    CONFIG_PATH: Path = Field(default_factory=_default_config_path)

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Settings":
        config_path = Path(path) if path is not None else _default_config_path()

        values = {}
        if config_path.exists():
            with open(config_path, "r") as f:
                values = json.load(f)
            if not isinstance(values, dict):
                raise ValueError(
                    f"Config file {config_path} must hold a JSON object."
                )

        env = {
            "SEED": os.getenv("COLWISE_SEED"),
            "WEATHER_CSV": os.getenv("COLWISE_WEATHER_CSV"),
            "TIMING_REPEATS": os.getenv("COLWISE_TIMING_REPEATS"),
        }
        values.update({key: value for key, value in env.items() if value})

        values["CONFIG_PATH"] = config_path
        return cls(**values)


settings = Settings.load()
