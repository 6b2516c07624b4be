from dataclasses import dataclass


@dataclass(frozen=True)
class GenerateRequestDTO:
    n: int = 1
    min_number: int | None = None  # None -> settings.random_min
    max_number: int | None = None  # None -> settings.random_max
    seed: int | None = None
    unique: bool = False
