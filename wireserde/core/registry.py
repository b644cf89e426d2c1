import logging
import uuid
from typing import Any

import numpy as np

from wireserde.core.codecs.buffer import (
    ByteBufferDecoder,
    ByteBufferEncoder,
    BytesDecoder,
    BytesEncoder,
    VoidDecoder,
    VoidEncoder,
)
from wireserde.core.codecs.numeric import (
    BooleanDecoder,
    BooleanEncoder,
    Float32Decoder,
    Float32Encoder,
    Float64Decoder,
    Float64Encoder,
    Int16Decoder,
    Int16Encoder,
    Int32Decoder,
    Int32Encoder,
    Int64Decoder,
    Int64Encoder,
)
from wireserde.core.codecs.string import StringDecoder, StringEncoder, UUIDDecoder, UUIDEncoder
from wireserde.core.models.types import ValueType
from wireserde.core.ports.codec import Decoder, Encoder
from wireserde.core.serde import Serde

BUILTIN_CODECS: dict[ValueType, tuple[type[Encoder[Any]], type[Decoder[Any]]]] = {
    ValueType.INT16: (Int16Encoder, Int16Decoder),
    ValueType.INT32: (Int32Encoder, Int32Decoder),
    ValueType.INT64: (Int64Encoder, Int64Decoder),
    ValueType.FLOAT32: (Float32Encoder, Float32Decoder),
    ValueType.FLOAT64: (Float64Encoder, Float64Decoder),
    ValueType.BOOLEAN: (BooleanEncoder, BooleanDecoder),
    ValueType.STRING: (StringEncoder, StringDecoder),
    ValueType.BYTES: (BytesEncoder, BytesDecoder),
    ValueType.BYTE_BUFFER: (ByteBufferEncoder, ByteBufferDecoder),
    ValueType.UUID: (UUIDEncoder, UUIDDecoder),
    ValueType.VOID: (VoidEncoder, VoidDecoder),
}

# Exact matches only: subclasses of these types are not resolved.
NATIVE_TYPES: dict[type, ValueType] = {
    int: ValueType.INT64,
    float: ValueType.FLOAT64,
    bool: ValueType.BOOLEAN,
    str: ValueType.STRING,
    bytes: ValueType.BYTES,
    bytearray: ValueType.BYTE_BUFFER,
    uuid.UUID: ValueType.UUID,
    type(None): ValueType.VOID,
    np.bool_: ValueType.BOOLEAN,
    np.int16: ValueType.INT16,
    np.int32: ValueType.INT32,
    np.int64: ValueType.INT64,
    np.float32: ValueType.FLOAT32,
    np.float64: ValueType.FLOAT64,
}


class Serdes:
    """
    Factory for Serde instances.

    A Serde is either resolved from a declared value type among a fixed
    set of built-ins, or composed from an explicit encoder/decoder pair.
    Every call returns a new Serde with fresh codec instances; nothing is
    pooled or shared.
    """
    _logger = logging.getLogger("core.registry")

    @classmethod
    def lookup(cls, value_type: ValueType | type) -> Serde[Any]:
        """
        Resolve the built-in Serde for `value_type`.

        `value_type` is either a ValueType member or one of the Python
        types listed in NATIVE_TYPES. Anything else raises ValueError
        immediately: falling back to another codec would corrupt data.
        """
        resolved = cls.resolve_type(value_type)
        encoder_cls, decoder_cls = BUILTIN_CODECS[resolved]

        cls._logger.debug(f"Resolved serde for {value_type!r}: {resolved}")
        return Serde(encoder=encoder_cls(), decoder=decoder_cls())

    @staticmethod
    def resolve_type(value_type: ValueType | type) -> ValueType:
        if isinstance(value_type, ValueType):
            return value_type

        try:
            return NATIVE_TYPES[value_type]
        except (KeyError, TypeError):
            pass

        raise ValueError(
            f"Unknown class for built-in serializer: {value_type!r}. "
            f"Supported types are: {', '.join(t.value for t in ValueType)}, "
            "or you should use compose() to build a serde from an explicit "
            "encoder and decoder."
        )

    @staticmethod
    def compose(encoder: Encoder[Any] | None, decoder: Decoder[Any] | None) -> Serde[Any]:
        """Build a Serde from an explicit encoder/decoder pair."""
        if encoder is None:
            raise ValueError("encoder must not be None")
        if decoder is None:
            raise ValueError("decoder must not be None")

        return Serde(encoder=encoder, decoder=decoder)

    @staticmethod
    def close(serde: Serde[Any]) -> None:
        """Release both codecs of `serde`; safe to call repeatedly."""
        serde.close()

    @classmethod
    def int16(cls) -> Serde[int]:
        return cls.lookup(ValueType.INT16)

    @classmethod
    def int32(cls) -> Serde[int]:
        return cls.lookup(ValueType.INT32)

    @classmethod
    def int64(cls) -> Serde[int]:
        return cls.lookup(ValueType.INT64)

    @classmethod
    def float32(cls) -> Serde[np.float32]:
        return cls.lookup(ValueType.FLOAT32)

    @classmethod
    def float64(cls) -> Serde[float]:
        return cls.lookup(ValueType.FLOAT64)

    @classmethod
    def boolean(cls) -> Serde[bool]:
        return cls.lookup(ValueType.BOOLEAN)

    @classmethod
    def string(cls) -> Serde[str]:
        return cls.lookup(ValueType.STRING)

    @classmethod
    def raw_bytes(cls) -> Serde[bytes]:
        return cls.lookup(ValueType.BYTES)

    @classmethod
    def byte_buffer(cls) -> Serde[bytearray]:
        return cls.lookup(ValueType.BYTE_BUFFER)

    @classmethod
    def uuid(cls) -> Serde[uuid.UUID]:
        return cls.lookup(ValueType.UUID)

    @classmethod
    def void(cls) -> Serde[None]:
        return cls.lookup(ValueType.VOID)
