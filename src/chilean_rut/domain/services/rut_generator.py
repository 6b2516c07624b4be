"""Random generation of valid RUTs.

Every generated body gets its check digit from ``calc_check_digit``, so the
results always pass ``Rut.is_valid``. Default bounds come from ``settings``.
"""
from __future__ import annotations

import logging
import random

from chilean_rut.config import settings
from chilean_rut.domain.exceptions import RutRangeError
from chilean_rut.domain.services.interfaces import IRandomSource
from chilean_rut.domain.value_objects.rut import MAX_NUMBER, Rut

logger = logging.getLogger(__name__)


def _bounds(min_number: int | None, max_number: int | None) -> tuple[int, int]:
    low = settings.random_min if min_number is None else min_number
    high = settings.random_max if max_number is None else max_number
    if low < 1 or high > MAX_NUMBER + 1:
        raise RutRangeError(f"Rango [{low}, {high}) fuera de 1..{MAX_NUMBER}")
    if low >= high:
        raise RutRangeError(f"Rango vacío [{low}, {high})")
    return low, high


def _source(seed: int | None, rng: IRandomSource | None) -> IRandomSource:
    if rng is not None:
        if seed is not None:
            raise ValueError("Usar seed o rng, no ambos")
        return rng
    return random.Random(seed)


def _draw(source: IRandomSource, low: int, high: int) -> Rut:
    return Rut.from_number(source.randrange(low, high))


def random_rut(
    min_number: int | None = None,
    max_number: int | None = None,
    seed: int | None = None,
    *,
    rng: IRandomSource | None = None,
) -> Rut:
    low, high = _bounds(min_number, max_number)
    return _draw(_source(seed, rng), low, high)


def randoms(
    n: int = 1,
    min_number: int | None = None,
    max_number: int | None = None,
    seed: int | None = None,
    *,
    rng: IRandomSource | None = None,
) -> list[Rut]:
    """``n`` independent draws from a single source; duplicates are possible."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    low, high = _bounds(min_number, max_number)
    source = _source(seed, rng)
    return [_draw(source, low, high) for _ in range(n)]


def uniques(
    n: int = 1,
    min_number: int | None = None,
    max_number: int | None = None,
    seed: int | None = None,
    *,
    rng: IRandomSource | None = None,
) -> set[Rut]:
    """``n`` distinct RUTs, resampling on collision.

    The range must hold at least ``n`` bodies, otherwise ``RutRangeError``.
    Requests close to the range size take many resamples; callers own that cost.
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    low, high = _bounds(min_number, max_number)
    if n > high - low:
        raise RutRangeError(f"No caben {n} RUT únicos en [{low}, {high})")
    source = _source(seed, rng)
    result: set[Rut] = set()
    draws = 0
    while len(result) < n:
        result.add(_draw(source, low, high))
        draws += 1
    logger.debug("uniques: %d RUTs in %d draws (%d collisions)", n, draws, draws - n)
    return result
