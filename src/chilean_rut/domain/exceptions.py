class InvalidRutError(ValueError):
    """Base error for any RUT that cannot be built."""


class InvalidNumberFormatError(InvalidRutError):
    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Formato inválido: {value!r}")


class InvalidCheckDigitError(InvalidRutError):
    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Dígito verificador inválido: {value!r}")


class RutRangeError(InvalidRutError):
    """Raised when a generation range cannot satisfy the request."""
