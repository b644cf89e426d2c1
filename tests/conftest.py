import os

import pytest
import yaml

from wireserde.bootstrap.config.loader import CONFIG_ENV_VAR
from wireserde.bootstrap.deps import get_settings
from wireserde.core.registry import Serdes
from wireserde.core.serde import Serde
from tests.fake.fake_codec import RecordingDecoder, RecordingEncoder


@pytest.fixture
def topic() -> str:
    return "testTopic"


@pytest.fixture
def recording_serde() -> Serde[str]:
    return Serdes.compose(RecordingEncoder(), RecordingDecoder())


@pytest.fixture
def config_file(tmp_path):
    base = tmp_path / "conf"
    base.mkdir()
    file = base / "wireserde.yaml"

    data = {
        "key": {
            "serializer": "UTF-16",
            "deserializer": "UTF-16",
        },
        "value": {
            "serializer": "latin-1",
            "deserializer": "latin-1",
        },
        "log_level": "DEBUG",
    }

    file.write_text(yaml.dump(data))
    return file


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    # Keep the developer's environment and working directory out of tests.
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    for name in list(os.environ):
        if name.startswith("WIRESERDE_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
