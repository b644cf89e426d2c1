import numbers
import struct
from typing import Any, ClassVar, TypeVar

import numpy as np

from wireserde.core.errors import SerializationError
from wireserde.core.ports.codec import Decoder, Encoder

T = TypeVar("T")


def float32_bits(value: Any) -> int:
    """
    Return the raw IEEE-754 single precision bit pattern of `value`.

    A numpy.float32 is reinterpreted as-is, so NaN payloads survive.
    Anything else is first narrowed to single precision by numpy.
    """
    single = np.asarray(value, dtype=np.float32).reshape(1)
    return int(single.view(np.uint32)[0])


def float32_from_bits(bits: int) -> np.float32:
    """Reinterpret a 32-bit pattern as a numpy.float32 without conversion."""
    return np.array([bits], dtype=np.uint32).view(np.float32)[0]


class FixedWidthEncoder(Encoder[T]):
    """
    Encoder for values with a fixed-width big-endian layout.

    Subclasses only declare `layout`; the packing itself is delegated to
    the struct module, which already rejects out-of-range integers and
    values of the wrong kind.
    """
    layout: ClassVar[struct.Struct]

    def encode(self, key: str, value: T | None) -> bytes | None:
        if value is None:
            return None

        try:
            return self.layout.pack(self.to_wire(value))
        except SerializationError:
            raise
        except (struct.error, OverflowError, TypeError, ValueError) as ex:
            raise SerializationError(
                f"{type(self).__name__} cannot encode {value!r}: {ex}"
            ) from ex

    def to_wire(self, value: T) -> Any:
        return value


class FixedWidthDecoder(Decoder[T]):
    """
    Decoder for values with a fixed-width big-endian layout.

    A buffer whose length differs from `layout.size` is rejected as a
    whole; it is never truncated, padded or partially parsed.
    """
    layout: ClassVar[struct.Struct]

    def decode(self, key: str, data: bytes | None) -> T | None:
        if data is None:
            return None

        if len(data) != self.layout.size:
            raise SerializationError(
                f"Size of data received by {type(self).__name__} "
                f"is not {self.layout.size} (got {len(data)})"
            )

        return self.from_wire(self.layout.unpack(data)[0])

    def from_wire(self, raw: Any) -> T:
        return raw


class IntegerEncoder(FixedWidthEncoder[int]):
    def to_wire(self, value: int) -> int:
        if isinstance(value, (bool, np.bool_)):
            raise SerializationError(
                f"{type(self).__name__} cannot encode {value!r}: not an integer"
            )
        return value


class Int16Encoder(IntegerEncoder):
    layout = struct.Struct(">h")


class Int16Decoder(FixedWidthDecoder[int]):
    layout = struct.Struct(">h")


class Int32Encoder(IntegerEncoder):
    layout = struct.Struct(">i")


class Int32Decoder(FixedWidthDecoder[int]):
    layout = struct.Struct(">i")


class Int64Encoder(IntegerEncoder):
    layout = struct.Struct(">q")


class Int64Decoder(FixedWidthDecoder[int]):
    layout = struct.Struct(">q")


class Float32Encoder(FixedWidthEncoder[np.float32]):
    """
    Single precision encoder working on raw bits.

    Python floats are doubles, and narrowing a signalling NaN through a
    double quiets it. The bit pattern is therefore taken straight from the
    numpy.float32 value and packed as an unsigned 32-bit integer.
    """
    layout = struct.Struct(">I")

    def to_wire(self, value: np.float32) -> int:
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, (numbers.Real, np.number)):
            raise SerializationError(
                f"{type(self).__name__} cannot encode {value!r}: not a real number"
            )
        return float32_bits(value)


class Float32Decoder(FixedWidthDecoder[np.float32]):
    layout = struct.Struct(">I")

    def from_wire(self, raw: int) -> np.float32:
        return float32_from_bits(raw)


class Float64Encoder(FixedWidthEncoder[float]):
    layout = struct.Struct(">d")


class Float64Decoder(FixedWidthDecoder[float]):
    layout = struct.Struct(">d")


class BooleanEncoder(FixedWidthEncoder[bool]):
    layout = struct.Struct(">B")

    def to_wire(self, value: bool) -> int:
        if not isinstance(value, (bool, np.bool_)):
            raise SerializationError(
                f"{type(self).__name__} cannot encode {value!r}: not a boolean"
            )
        return 1 if value else 0


class BooleanDecoder(FixedWidthDecoder[bool]):
    layout = struct.Struct(">B")

    def from_wire(self, raw: int) -> bool:
        if raw == 0:
            return False
        if raw == 1:
            return True
        raise SerializationError(
            f"Unexpected byte received by {type(self).__name__}: {raw:#04x}"
        )
