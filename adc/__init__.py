from importlib.metadata import PackageNotFoundError, version

from adc.adcexceptions import (
    ADCBufferTooSmall,
    ADCException,
    ADCInvalidOffset,
    ADCTruncatedInput,
)
from adc.decoder import ADCDecoder, adcdecode

try:
    __version__ = version("adc.six")
except PackageNotFoundError:
    # package is not installed, return default
    __version__ = "0.0"

__all__ = [
    "ADCBufferTooSmall",
    "ADCDecoder",
    "ADCException",
    "ADCInvalidOffset",
    "ADCTruncatedInput",
    "adcdecode",
]

if __name__ == "__main__":
    print(__version__)
