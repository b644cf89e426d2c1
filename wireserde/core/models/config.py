from collections.abc import Mapping
from typing import Annotated, Any, Literal, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_ENCODING = "UTF-8"

CodecRole = Literal["serializer", "deserializer"]


class EncodingConfig(BaseModel):
    """
    Text-encoding options for one codec, resolved from a flat option
    mapping such as::

        {"key.serializer.encoding": "UTF-16", "serializer.encoding": "UTF-8"}

    Only two options are recognized per codec: the one scoped to the
    key/value position the codec works on, and the unscoped fallback for
    its role. Everything else in the mapping is ignored.
    """
    model_config = ConfigDict(frozen=True)

    scoped: Annotated[
        str | None,
        Field(
            description="Encoding from '<key|value>.<role>.encoding'.",
            default=None
        )
    ]

    fallback: Annotated[
        str | None,
        Field(
            description="Encoding from '<role>.encoding'.",
            default=None
        )
    ]

    @field_validator("scoped", "fallback", mode="before")
    @classmethod
    def ignore_non_text(cls, v: Any) -> str | None:
        # Options that are not strings are treated as absent.
        return v if isinstance(v, str) else None

    @staticmethod
    def option_names(role: CodecRole, is_key: bool) -> tuple[str, str]:
        position = "key" if is_key else "value"
        return f"{position}.{role}.encoding", f"{role}.encoding"

    @classmethod
    def from_configs(
        cls,
        configs: Mapping[str, Any],
        role: CodecRole,
        is_key: bool
    ) -> Self:
        scoped, fallback = cls.option_names(role, is_key)
        return cls(scoped=configs.get(scoped), fallback=configs.get(fallback))

    @property
    def encoding(self) -> str:
        """The effective encoding name: scoped, then fallback, then UTF-8."""
        return self.scoped or self.fallback or DEFAULT_ENCODING
