from __future__ import annotations

from chilean_rut.application.dtos.generate_request_dto import GenerateRequestDTO
from chilean_rut.application.dtos.rut_dto import RutDTO
from chilean_rut.application.use_cases.generate_ruts import GenerateRutsUseCase
from chilean_rut.application.use_cases.validate_rut import ValidateRutUseCase
from tests.unit._fakes_random import FakeRandom


def test_validate_use_case_valid_rut():
    res = ValidateRutUseCase().execute("15605286-8")
    assert res.is_valid
    assert res.error is None
    assert res.rut == RutDTO(number=15605286, check_digit="8", formatted="15.605.286-8")


def test_validate_use_case_wrong_check_digit():
    res = ValidateRutUseCase().execute("15.605.286-k")
    assert not res.is_valid
    assert res.rut is not None
    assert res.error is None


def test_validate_use_case_bad_format_is_reported():
    res = ValidateRutUseCase().execute("12-A")
    assert not res.is_valid
    assert res.rut is None
    assert "A" in res.error


def test_generate_use_case_randoms():
    uc = GenerateRutsUseCase(rng=FakeRandom([17679133, 1234567]))
    out = uc.execute(GenerateRequestDTO(n=2))
    assert [d.formatted for d in out] == ["17.679.133-0", "1.234.567-4"]


def test_generate_use_case_uniques_sorted():
    uc = GenerateRutsUseCase(rng=FakeRandom([30, 10, 30, 20]))
    out = uc.execute(GenerateRequestDTO(n=3, min_number=1, max_number=100, unique=True))
    assert [d.number for d in out] == [10, 20, 30]


def test_generate_use_case_seeded():
    req = GenerateRequestDTO(n=5, seed=99, unique=True)
    assert GenerateRutsUseCase().execute(req) == GenerateRutsUseCase().execute(req)
