from dataclasses import dataclass

from chilean_rut.application.dtos.rut_dto import RutDTO


@dataclass(frozen=True)
class ValidationResultDTO:
    text: str
    rut: RutDTO | None
    is_valid: bool
    error: str | None = None
