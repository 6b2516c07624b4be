from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load .env if present
load_dotenv()


@dataclass(frozen=True)
class Settings:
    random_min: int = int(os.getenv("RUT_RANDOM_MIN", "4000000"))
    random_max: int = int(os.getenv("RUT_RANDOM_MAX", "80000000"))

    def __post_init__(self) -> None:
        if self.random_min < 1:
            raise ValueError(f"RUT_RANDOM_MIN must be positive, got {self.random_min}")
        if self.random_min >= self.random_max:
            raise ValueError(
                f"RUT_RANDOM_MIN ({self.random_min}) must be lower than RUT_RANDOM_MAX ({self.random_max})"
            )


settings = Settings()
