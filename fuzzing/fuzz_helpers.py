import contextlib
import io
from collections.abc import Iterator

import atheris


class EnhancedFuzzedDataProvider(atheris.FuzzedDataProvider):  # type: ignore[misc]
    def ConsumeRandomBytes(self) -> bytes:
        return self.ConsumeBytes(self.ConsumeIntInRange(0, self.remaining_bytes()))

    def ConsumeRemainingBytes(self) -> bytes:
        return self.ConsumeBytes(self.remaining_bytes())

    @contextlib.contextmanager
    def ConsumeMemoryFile(self, all_data: bool = False) -> Iterator[io.BytesIO]:
        file_data = (
            self.ConsumeRemainingBytes() if all_data else self.ConsumeRandomBytes()
        )
        file = io.BytesIO(file_data)
        yield file
        file.close()
