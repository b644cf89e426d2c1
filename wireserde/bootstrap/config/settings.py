from typing import Annotated, Literal

from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from wireserde.bootstrap.config.loader import get_configfile
from wireserde.core.models.config import DEFAULT_ENCODING, EncodingConfig


class EncodingSettings(BaseModel):
    serializer: Annotated[
        str,
        Field(
            description=(
                "Text encoding used when turning strings (and UUIDs) into bytes.\n"
                "Any name known to Python's codec registry is accepted, e.g.\n"
                "'UTF-8', 'UTF8', 'UTF-16', 'latin-1'. Unknown names are reported\n"
                "when the codec is configured, never replaced by a default.\n"
                "'UTF-16' and 'UTF-32' always write a big-endian BOM and big-endian\n"
                "code units, whatever the host byte order."
            ),
            default=DEFAULT_ENCODING
        )
    ]

    deserializer: Annotated[
        str,
        Field(
            description="Text encoding used when turning bytes back into strings.",
            default=DEFAULT_ENCODING
        )
    ]


class SerdeSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="WIRESERDE_",
        env_nested_delimiter="__",
        extra="ignore"
    )

    key: Annotated[
        EncodingSettings,
        Field(
            description="Encodings applied to data in a channel's key position.",
            default_factory=EncodingSettings
        )
    ]

    value: Annotated[
        EncodingSettings,
        Field(
            description="Encodings applied to data in a channel's value position.",
            default_factory=EncodingSettings
        )
    ]

    log_level: Annotated[
        Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        Field(
            description="Logging verbosity passed to setup_logging().",
            default="INFO"
        )
    ]

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Priority: init kwargs > ENV > YAML file
        sources: tuple[PydanticBaseSettingsSource, ...] = (init_settings, env_settings)

        configfile = get_configfile()
        if configfile is not None:
            sources += (YamlConfigSettingsSource(settings_cls, yaml_file=configfile),)

        return sources

    def codec_configs(self) -> dict[str, str]:
        """
        Render the settings as the flat option mapping understood by the
        configurable codecs.
        """
        configs: dict[str, str] = {}

        for is_key, encodings in ((True, self.key), (False, self.value)):
            serializer, _ = EncodingConfig.option_names("serializer", is_key)
            deserializer, _ = EncodingConfig.option_names("deserializer", is_key)
            configs[serializer] = encodings.serializer
            configs[deserializer] = encodings.deserializer

        return configs
