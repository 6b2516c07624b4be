from __future__ import annotations

from chilean_rut.application.dtos.generate_request_dto import GenerateRequestDTO
from chilean_rut.application.dtos.rut_dto import RutDTO
from chilean_rut.domain.services.interfaces import IRandomSource
from chilean_rut.domain.services.rut_generator import randoms, uniques


class GenerateRutsUseCase:
    def __init__(self, rng: IRandomSource | None = None) -> None:
        self.rng = rng

    def execute(self, req: GenerateRequestDTO) -> list[RutDTO]:
        if req.unique:
            ruts = sorted(uniques(req.n, req.min_number, req.max_number, req.seed, rng=self.rng))
        else:
            ruts = randoms(req.n, req.min_number, req.max_number, req.seed, rng=self.rng)
        return [RutDTO.from_domain(r) for r in ruts]
