from dataclasses import dataclass

from chilean_rut.domain.value_objects.rut import Rut
from chilean_rut.domain.value_objects.rut_format import RutFormat


@dataclass(frozen=True)
class RutDTO:
    number: int
    check_digit: str
    formatted: str

    @classmethod
    def from_domain(cls, rut: Rut) -> "RutDTO":
        return cls(
            number=rut.number,
            check_digit=rut.check_digit,
            formatted=rut.format(RutFormat.FULL),
        )
