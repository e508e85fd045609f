import sys

import atheris

from fuzz_helpers import EnhancedFuzzedDataProvider

with atheris.instrument_imports():
    from adc.decoder import ADCDecoder
    from utils import prepare_adc_fuzzing

from adc.adcexceptions import ADCException


def fuzz_one_input(data: bytes) -> None:
    fdp = EnhancedFuzzedDataProvider(data)
    bufsize = fdp.ConsumeIntInRange(1, 1024)

    try:
        with fdp.ConsumeMemoryFile(all_data=True) as f:
            decoder = ADCDecoder(f)
            buf = bytearray(bufsize)
            total = 0
            while True:
                n = decoder.produce(buf)
                if n == 0:
                    break
                assert 0 < n <= bufsize
                total += n
            assert decoder.produce(buf) == 0
            assert total == decoder.nproduced
    except ADCException:
        return


if __name__ == "__main__":
    prepare_adc_fuzzing()
    atheris.Setup(sys.argv, fuzz_one_input)
    atheris.Fuzz()
