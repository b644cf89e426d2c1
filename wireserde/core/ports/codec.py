from collections.abc import Mapping
from typing import Any, Protocol, TypeVar

T = TypeVar("T")


class Encoder(Protocol[T]):
    """
    Defines the interface for turning a typed value into bytes before it
    is handed to a keyed messaging channel.

    Implementations must be:
    - deterministic
    - pure (no side effects beyond configuration state)
    - null-preserving: None encodes to None, never to b""
    """

    def configure(self, configs: Mapping[str, Any], is_key: bool) -> None:
        """
        Apply configuration once, before the first call to `encode`.

        `is_key` tells whether the encoder works on the key position or
        the value position of the channel. Unrecognized options are
        ignored. The default implementation accepts and ignores anything.
        """

    def encode(self, key: str, value: T | None) -> bytes | None:
        """Encode `value` for the channel identified by `key`."""

    def close(self) -> None:
        """
        Release configuration state. Must be idempotent and must not raise.
        """


class Decoder(Protocol[T]):
    """
    Defines the interface for turning bytes received from a keyed
    messaging channel back into a typed value.

    Implementations must reject malformed input with SerializationError
    rather than return a partially decoded value.
    """

    def configure(self, configs: Mapping[str, Any], is_key: bool) -> None:
        """
        Apply configuration once, before the first call to `decode`.
        See `Encoder.configure`.
        """

    def decode(self, key: str, data: bytes | None) -> T | None:
        """Decode `data` received on the channel identified by `key`."""

    def close(self) -> None:
        """
        Release configuration state. Must be idempotent and must not raise.
        """
