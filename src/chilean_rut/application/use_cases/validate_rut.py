from __future__ import annotations

import logging

from chilean_rut.application.dtos.rut_dto import RutDTO
from chilean_rut.application.dtos.validation_result_dto import ValidationResultDTO
from chilean_rut.domain.exceptions import InvalidRutError
from chilean_rut.domain.value_objects.rut import Rut

logger = logging.getLogger(__name__)


class ValidateRutUseCase:
    """Parses user-supplied text and reports the outcome as data."""

    def execute(self, text: str) -> ValidationResultDTO:
        try:
            rut = Rut.parse(text)
        except InvalidRutError as e:
            logger.debug("Rejected RUT %r: %s", text, e)
            return ValidationResultDTO(text, None, False, str(e))
        return ValidationResultDTO(text, RutDTO.from_domain(rut), rut.is_valid())
