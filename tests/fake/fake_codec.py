from collections.abc import Mapping
from typing import Any

from wireserde.core.ports.codec import Decoder, Encoder


class RecordingEncoder(Encoder[str]):
    """
    A minimal in-memory encoder intended for tests.

    It records configuration and close calls so tests can assert how a
    Serde drives its halves. Encoding is plain ASCII.
    """

    def __init__(self) -> None:
        self.configured: list[tuple[dict[str, Any], bool]] = []
        self.close_calls = 0

    def configure(self, configs: Mapping[str, Any], is_key: bool) -> None:
        self.configured.append((dict(configs), is_key))

    def encode(self, key: str, value: str | None) -> bytes | None:
        return None if value is None else value.encode("ascii")

    def close(self) -> None:
        self.close_calls += 1


class RecordingDecoder(Decoder[str]):
    def __init__(self) -> None:
        self.configured: list[tuple[dict[str, Any], bool]] = []
        self.close_calls = 0

    def configure(self, configs: Mapping[str, Any], is_key: bool) -> None:
        self.configured.append((dict(configs), is_key))

    def decode(self, key: str, data: bytes | None) -> str | None:
        return None if data is None else data.decode("ascii")

    def close(self) -> None:
        self.close_calls += 1


class FailingCloseEncoder(RecordingEncoder):
    def close(self) -> None:
        super().close()
        raise RuntimeError("boom")
