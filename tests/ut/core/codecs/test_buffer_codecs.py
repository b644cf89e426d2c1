import pytest

from wireserde.core.errors import SerializationError
from wireserde.core.registry import Serdes


@pytest.fixture
def buf() -> bytearray:
    buf = bytearray(10)
    buf[:9] = b"my string"
    return buf


@pytest.mark.ut
def test_byte_buffer_roundtrip(topic, buf):
    with Serdes.byte_buffer() as serde:
        data = serde.encode(topic, buf)
        result = serde.decode(topic, data)

        assert data == b"my string\x00"
        assert isinstance(result, bytearray)
        assert result == buf
        assert result is not buf


@pytest.mark.ut
def test_byte_buffer_zero_length(topic):
    serde = Serdes.byte_buffer()

    data = serde.encode(topic, bytearray())

    assert data == b""
    assert serde.decode(topic, data) == bytearray()


@pytest.mark.ut
def test_byte_buffer_null(topic):
    serde = Serdes.byte_buffer()

    assert serde.encode(topic, None) is None
    assert serde.decode(topic, None) is None


@pytest.mark.ut
def test_byte_buffer_encode_copies_contents(topic, buf):
    serde = Serdes.byte_buffer()

    data = serde.encode(topic, buf)
    buf[0:2] = b"MY"

    assert data == b"my string\x00"


@pytest.mark.ut
def test_byte_buffer_decode_returns_independent_buffer(topic):
    serde = Serdes.byte_buffer()
    data = b"abc"

    first = serde.decode(topic, data)
    second = serde.decode(topic, data)
    first[0] = ord("z")

    assert data == b"abc"
    assert second == bytearray(b"abc")


@pytest.mark.ut
def test_byte_buffer_accepts_memoryview(topic, buf):
    view = memoryview(buf)[3:9]

    assert Serdes.byte_buffer().encode(topic, view) == b"string"


@pytest.mark.ut
def test_byte_buffer_rejects_non_buffer(topic):
    with pytest.raises(SerializationError):
        Serdes.byte_buffer().encode(topic, "my string")


@pytest.mark.ut
def test_raw_bytes_roundtrip(topic):
    serde = Serdes.raw_bytes()

    assert serde.decode(topic, serde.encode(topic, b"\x00\x01\xff")) == b"\x00\x01\xff"
    assert serde.decode(topic, serde.encode(topic, b"")) == b""
    assert serde.decode(topic, serde.encode(topic, None)) is None


@pytest.mark.ut
def test_raw_bytes_rejects_integers(topic):
    # bytes(5) would silently produce five zero bytes
    with pytest.raises(SerializationError):
        Serdes.raw_bytes().encode(topic, 5)


@pytest.mark.ut
def test_void_serde(topic):
    serde = Serdes.void()

    assert serde.encode(topic, None) is None
    assert serde.decode(topic, None) is None


@pytest.mark.ut
def test_void_rejects_present_data(topic):
    serde = Serdes.void()

    with pytest.raises(SerializationError):
        serde.decode(topic, b"")

    with pytest.raises(SerializationError):
        serde.encode(topic, 0)
