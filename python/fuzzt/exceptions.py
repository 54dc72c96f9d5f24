"""Exceptions raised by fuzzt."""


class FuzztError(Exception):
    """Base exception for all fuzzt errors."""


class ValidationError(FuzztError, ValueError):
    """Raised when input validation fails (invalid parameters, out of range values)."""


class LengthMismatchError(ValidationError):
    """Raised when an algorithm that needs equal-length inputs gets unequal ones.

    Only Hamming distance raises this. The message matches the one used
    everywhere else in the package so callers can match on it.
    """

    def __init__(self, message: str = "Differing length arguments provided"):
        super().__init__(message)


class AlgorithmError(FuzztError, ValueError):
    """Raised when an unknown or unsupported algorithm is specified."""


__all__ = ["FuzztError", "ValidationError", "LengthMismatchError", "AlgorithmError"]
