import codecs
import logging
from collections.abc import Mapping
from typing import Any
from uuid import UUID

from wireserde.core.errors import SerializationError
from wireserde.core.models.config import DEFAULT_ENCODING, CodecRole, EncodingConfig
from wireserde.core.ports.codec import Decoder, Encoder

# Python writes these BOM-prefixed forms in host byte order; pin them to
# big-endian so the bytes are the same on every machine.
BIG_ENDIAN_WITH_BOM: dict[str, tuple[str, bytes]] = {
    "utf-16": ("utf-16-be", codecs.BOM_UTF16_BE),
    "utf-32": ("utf-32-be", codecs.BOM_UTF32_BE),
}


class TextCodec:
    """
    Shared configuration handling for text based codecs.

    The encoding is set once by `configure` and read-only afterwards, so
    concurrent encode/decode calls are safe once configuration returned.
    Configuration itself must not run concurrently.
    """
    role: CodecRole

    def __init__(self) -> None:
        self._encoding: str | None = None
        self._configured = False
        self._logger = logging.getLogger("core.codecs.string")

    @property
    def encoding(self) -> str:
        return self._encoding or DEFAULT_ENCODING

    def configure(self, configs: Mapping[str, Any], is_key: bool) -> None:
        if self._configured:
            raise RuntimeError(f"{type(self).__name__} is already configured")

        config = EncodingConfig.from_configs(configs, self.role, is_key)
        # Unknown names raise LookupError from the codec registry.
        codecs.lookup(config.encoding)

        self._encoding = config.encoding
        self._configured = True
        self._logger.debug(
            f"Configured {type(self).__name__} "
            f"({'key' if is_key else 'value'}) with encoding {self._encoding}"
        )

    def close(self) -> None:
        self._encoding = None
        self._configured = False

    def to_bytes(self, text: str) -> bytes:
        pinned = BIG_ENDIAN_WITH_BOM.get(codecs.lookup(self.encoding).name)
        try:
            if pinned is not None:
                encoding, bom = pinned
                return bom + text.encode(encoding)
            return text.encode(self.encoding)
        except UnicodeError as ex:
            raise SerializationError(
                f"Error when serializing string to bytes with encoding {self.encoding}"
            ) from ex

    def to_text(self, data: bytes) -> str:
        try:
            return bytes(data).decode(self.encoding)
        except UnicodeError as ex:
            raise SerializationError(
                f"Error when deserializing bytes to string with encoding {self.encoding}"
            ) from ex


class StringEncoder(TextCodec, Encoder[str]):
    role = "serializer"

    def encode(self, key: str, value: str | None) -> bytes | None:
        if value is None:
            return None

        if not isinstance(value, str):
            raise SerializationError(f"StringEncoder cannot encode {value!r}: not a str")

        return self.to_bytes(value)


class StringDecoder(TextCodec, Decoder[str]):
    role = "deserializer"

    def decode(self, key: str, data: bytes | None) -> str | None:
        if data is None:
            return None

        return self.to_text(data)


class UUIDEncoder(TextCodec, Encoder[UUID]):
    """Encodes a UUID as its canonical hyphenated text form."""
    role = "serializer"

    def encode(self, key: str, value: UUID | None) -> bytes | None:
        if value is None:
            return None

        if not isinstance(value, UUID):
            raise SerializationError(f"UUIDEncoder cannot encode {value!r}: not a UUID")

        return self.to_bytes(str(value))


class UUIDDecoder(TextCodec, Decoder[UUID]):
    role = "deserializer"

    def decode(self, key: str, data: bytes | None) -> UUID | None:
        if data is None:
            return None

        text = self.to_text(data)
        try:
            return UUID(text)
        except ValueError as ex:
            raise SerializationError(f"Error parsing data into UUID: {text!r}") from ex
