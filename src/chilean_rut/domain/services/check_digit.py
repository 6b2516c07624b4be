from __future__ import annotations

SERIE = (2, 3, 4, 5, 6, 7)
ELEVEN = 11
TEN = 10
K = "k"


def calc_check_digit(number: int) -> str:
    """Modulo-11 check digit for a numeric body.

    Digits are weighted 2..7 from the right, cycling back to 2 after 7.
    """
    if number < 0:
        raise ValueError(f"RUT body must be non-negative, got {number}")
    total = 0
    index = 0
    while number > 0:
        total += SERIE[index] * (number % TEN)
        number //= TEN
        index = (index + 1) % len(SERIE)
    return _dv_from_result(ELEVEN - (total % ELEVEN))


def _dv_from_result(result: int) -> str:
    if result == ELEVEN:
        return "0"
    if result == TEN:
        return K
    return str(result)
