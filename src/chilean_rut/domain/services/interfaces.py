from typing import Protocol


class IRandomSource(Protocol):
    """Anything with ``random.Random.randrange`` semantics over ``[start, stop)``."""

    def randrange(self, start: int, stop: int) -> int: ...
