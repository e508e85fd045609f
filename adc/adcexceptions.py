__all__ = [
    "ADCException",
    "ADCTruncatedInput",
    "ADCInvalidOffset",
    "ADCBufferTooSmall",
]


class ADCException(Exception):
    """Base class for ADC decoding exceptions."""


class ADCTruncatedInput(ADCException, EOFError):
    """Raised when the input ends inside a chunk header or literal payload."""


class ADCInvalidOffset(ADCException, ValueError):
    """Raised when a run refers to history that has not been produced yet."""


class ADCBufferTooSmall(ADCException):
    """Raised when an output buffer and the decoded stream differ in length."""
