"""Chilean RUT value object: check digit, parsing, formatting and generation."""
from chilean_rut.config import Settings, settings
from chilean_rut.domain.exceptions import (
    InvalidCheckDigitError,
    InvalidNumberFormatError,
    InvalidRutError,
    RutRangeError,
)
from chilean_rut.domain.services.check_digit import calc_check_digit
from chilean_rut.domain.services.rut_generator import random_rut, randoms, uniques
from chilean_rut.domain.value_objects.rut import Rut, format_rut, is_valid, is_valid_text
from chilean_rut.domain.value_objects.rut_format import RutFormat

construct = Rut.from_parts
parse = Rut.parse

__all__ = [
    "InvalidCheckDigitError",
    "InvalidNumberFormatError",
    "InvalidRutError",
    "Rut",
    "RutFormat",
    "RutRangeError",
    "Settings",
    "calc_check_digit",
    "construct",
    "format_rut",
    "is_valid",
    "is_valid_text",
    "parse",
    "random_rut",
    "randoms",
    "settings",
    "uniques",
]
