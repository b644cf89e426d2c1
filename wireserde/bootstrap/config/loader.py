import os
from pathlib import Path

CONFIG_ENV_VAR = "WIRESERDECONFIG"
DEFAULT_CONFIG_NAME = "wireserde.yaml"


def get_configfile() -> Path | None:
    """
    Locate the YAML settings file, if any.

    Priority: ENV > default file in current working directory > no file.
    """
    raw = os.getenv(CONFIG_ENV_VAR)

    if raw is None:
        file = Path.cwd() / DEFAULT_CONFIG_NAME
        return file if file.is_file() else None

    file = Path(raw)
    if not file.is_file():
        raise SystemExit(
            f"[config] Configuration file not found: '{file}'.\n"
            f"  - Fix or unset the {CONFIG_ENV_VAR} environment variable\n"
            f"  - Or place a '{DEFAULT_CONFIG_NAME}' file in the current working directory."
        )

    return file
