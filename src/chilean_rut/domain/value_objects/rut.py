from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

from chilean_rut.domain.exceptions import InvalidCheckDigitError, InvalidNumberFormatError, InvalidRutError
from chilean_rut.domain.services.check_digit import calc_check_digit
from chilean_rut.domain.value_objects.rut_format import RutFormat

# 1-8 digits, either plain or dotted in groups of three from the right
NUMBER_RGX = re.compile(r"[1-9]\d{0,7}|[1-9]\d{0,2}\.\d{3}|[1-9]\d?\.\d{3}\.\d{3}", re.ASCII)
DV_RGX = re.compile(r"[0-9kK]", re.ASCII)
MAX_NUMBER = 99_999_999
ZERO = "0"


@dataclass(frozen=True)
class Rut:
    """Value Object para RUT chileno: parte numérica + dígito verificador.

    La igualdad y el hash usan ambos campos; el orden solo compara ``number``.
    """

    number: int
    check_digit: str

    def __post_init__(self) -> None:
        if isinstance(self.number, bool) or not isinstance(self.number, int):
            raise InvalidNumberFormatError(self.number)
        if not 1 <= self.number <= MAX_NUMBER:
            raise InvalidNumberFormatError(self.number)
        if not isinstance(self.check_digit, str) or not DV_RGX.fullmatch(self.check_digit):
            raise InvalidCheckDigitError(self.check_digit)
        object.__setattr__(self, "check_digit", self.check_digit.lower())

    @classmethod
    def from_parts(cls, number: str, check_digit: str) -> Rut:
        """Build from the textual body (``"12.345.678"`` or ``"12345678"``) and dv."""
        if not isinstance(number, str) or not NUMBER_RGX.fullmatch(number):
            raise InvalidNumberFormatError(number)
        if not isinstance(check_digit, str) or not DV_RGX.fullmatch(check_digit):
            raise InvalidCheckDigitError(check_digit)
        return cls(int(number.replace(".", "")), check_digit)

    @classmethod
    def from_number(cls, number: int) -> Rut:
        return cls(number, calc_check_digit(number))

    @classmethod
    def parse(cls, rut: str) -> Rut:
        """Parse ``12345678-k``, ``12345678k``, ``12.345.678-k`` or ``12.345.678K``.

        Empty text and ``"0"`` are historically treated as "no RUT" and go
        through ``from_parts("", "")``, so they fail as an invalid format.
        """
        if not rut or rut == ZERO:
            return cls.from_parts("", "")
        dv = rut[-1]
        sub = rut[:-1]
        number = sub[:-1] if sub.endswith("-") else sub
        return cls.from_parts(number, dv)

    def is_valid(self) -> bool:
        return calc_check_digit(self.number) == self.check_digit

    def format(self, fmt: RutFormat = RutFormat.FULL) -> str:
        if fmt is RutFormat.FULL:
            return f"{self.number:,}".replace(",", ".") + f"-{self.check_digit}"
        if fmt is RutFormat.ONLY_DASH:
            return f"{self.number}-{self.check_digit}"
        return f"{self.number}{self.check_digit}"

    def __str__(self) -> str:
        return self.format(RutFormat.FULL)

    def __iter__(self) -> Iterator[int | str]:
        yield self.number
        yield self.check_digit

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Rut):
            return NotImplemented
        return self.number < other.number

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Rut):
            return NotImplemented
        return self.number <= other.number

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Rut):
            return NotImplemented
        return self.number > other.number

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Rut):
            return NotImplemented
        return self.number >= other.number


def is_valid(rut: Rut) -> bool:
    return rut.is_valid()


def is_valid_text(text: str) -> bool:
    """True when ``text`` parses and its check digit matches."""
    try:
        return Rut.parse(text).is_valid()
    except InvalidRutError:
        return False


def format_rut(rut: Rut, fmt: RutFormat = RutFormat.FULL) -> str:
    return rut.format(fmt)
