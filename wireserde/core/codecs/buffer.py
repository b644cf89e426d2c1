from collections.abc import Buffer

from wireserde.core.errors import SerializationError
from wireserde.core.ports.codec import Decoder, Encoder


class BytesEncoder(Encoder[bytes]):
    def encode(self, key: str, value: bytes | None) -> bytes | None:
        if value is None:
            return None

        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise SerializationError(
                f"BytesEncoder cannot encode {type(value).__name__}: not bytes"
            )

        return bytes(value)


class BytesDecoder(Decoder[bytes]):
    def decode(self, key: str, data: bytes | None) -> bytes | None:
        if data is None:
            return None

        return bytes(data)


class ByteBufferEncoder(Encoder[bytearray]):
    """
    Encodes any bytes-like object (bytes, bytearray, memoryview).

    The encoded bytes are an immutable snapshot of the buffer contents at
    call time: mutating the caller's buffer afterwards has no effect on
    them. A zero-length buffer encodes to b"", not None.
    """

    def encode(self, key: str, value: Buffer | None) -> bytes | None:
        if value is None:
            return None

        try:
            return bytes(memoryview(value))
        except TypeError as ex:
            raise SerializationError(
                f"ByteBufferEncoder cannot encode {type(value).__name__}: not a buffer"
            ) from ex


class ByteBufferDecoder(Decoder[bytearray]):
    """Decodes into a fresh, caller-owned bytearray."""

    def decode(self, key: str, data: bytes | None) -> bytearray | None:
        if data is None:
            return None

        return bytearray(data)


class VoidEncoder(Encoder[None]):
    def encode(self, key: str, value: None) -> None:
        if value is not None:
            raise SerializationError(f"VoidEncoder cannot encode {value!r}: only None is allowed")

        return None


class VoidDecoder(Decoder[None]):
    def decode(self, key: str, data: bytes | None) -> None:
        if data is not None:
            raise SerializationError("Data should be None for a VoidDecoder")

        return None
