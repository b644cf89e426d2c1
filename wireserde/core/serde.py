import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import TracebackType
from typing import Any, Generic, Self, TypeVar

from wireserde.core.ports.codec import Decoder, Encoder

T = TypeVar("T")

logger = logging.getLogger("core.serde")


@dataclass(frozen=True, slots=True)
class Serde(Generic[T]):
    """
    An immutable pairing of one encoder and one decoder for a single
    value type.

    Invariant:
        decode(key, encode(key, v)) == v for every v of the type,
        including None.

    The Serde owns both codecs for its lifetime. `close` releases them,
    may be called any number of times and never raises; using the Serde
    as a context manager guarantees it runs on every exit path:

        with Serdes.string() as serde:
            data = serde.encode("orders", "hello")
    """
    encoder: Encoder[T]
    decoder: Decoder[T]

    def encode(self, key: str, value: T | None) -> bytes | None:
        return self.encoder.encode(key, value)

    def decode(self, key: str, data: bytes | None) -> T | None:
        return self.decoder.decode(key, data)

    def configure(self, configs: Mapping[str, Any], is_key: bool) -> None:
        """Configure both halves with the same option mapping."""
        self.encoder.configure(configs, is_key)
        self.decoder.configure(configs, is_key)

    def close(self) -> None:
        for codec in (self.encoder, self.decoder):
            try:
                codec.close()
            except Exception as ex:
                # close() is a release path: report, keep releasing.
                logger.error(
                    f"Error while closing {type(codec).__name__}: {ex}",
                    exc_info=ex
                )

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None
    ) -> None:
        self.close()
