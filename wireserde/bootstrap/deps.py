import json
from functools import lru_cache
from typing import Any

from pydantic import ValidationError

from wireserde.bootstrap.config.settings import SerdeSettings
from wireserde.core.helpers.utils import setup_logging
from wireserde.core.models.types import ValueType
from wireserde.core.registry import Serdes
from wireserde.core.serde import Serde


@lru_cache
def get_settings() -> SerdeSettings:
    try:
        return SerdeSettings()
    except ValidationError as ex:
        msg = ["Configuration validation failed:"]
        errs = json.loads(ex.json())
        for err in errs:
            msg.append(f"  {'.'.join(str(part) for part in err['loc'])}: {err['msg']}")
        raise SystemExit("\n".join(msg))


def bootstrap() -> SerdeSettings:
    settings = get_settings()
    setup_logging(settings.log_level)
    return settings


def configured_serde(value_type: ValueType | type, is_key: bool) -> Serde[Any]:
    """
    Resolve a built-in Serde and configure it from the loaded settings.

    The caller owns the returned Serde and must close it.
    """
    serde = Serdes.lookup(value_type)
    try:
        serde.configure(get_settings().codec_configs(), is_key)
    except Exception:
        serde.close()
        raise
    return serde
