from __future__ import annotations


class B58UUIDError(ValueError):
    """Base class for every failure raised by the codec."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, B58UUIDError) or type(other) is not type(self):
            return NotImplemented
        return self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class InvalidUUIDError(B58UUIDError):
    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"Invalid UUID: {self.detail}"


class InvalidBase58Error(B58UUIDError):
    def __init__(self, value: str, position: int, detail: str = "") -> None:
        super().__init__(value, position)
        self.value = value
        self.position = position
        self.detail = detail or f"invalid character at position {position}: {value[position]!r}"

    def __reduce__(self):
        return type(self), (self.value, self.position, self.detail)

    def __str__(self) -> str:
        return f"Invalid Base58: {self.detail}"


class InvalidLengthError(B58UUIDError):
    def __init__(self, expected: int, got: int) -> None:
        super().__init__(expected, got)
        self.expected = expected
        self.got = got

    def __str__(self) -> str:
        return f"Invalid length: expected {self.expected}, got {self.got}"


class Base58OverflowError(B58UUIDError):
    def __init__(self, value: str = "") -> None:
        super().__init__()
        # diagnostics only, not part of equality
        self.value = value

    def __reduce__(self):
        return type(self), (self.value,)

    def __str__(self) -> str:
        return "Arithmetic overflow: value exceeds maximum UUID value"


class RandomSourceError(B58UUIDError):
    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"Random source failure: {self.detail}"
