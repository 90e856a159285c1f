import pytest
import requests

from quantum_lottery import create_app
from quantum_lottery.errors import RandomSourceError
from quantum_lottery.random_source import (
    QrngByteSource,
    SystemByteSource,
    build_byte_source,
    get_byte_source,
    validate_payload,
)


class FakeResponse:
    def __init__(self, payload=None, status_code=200, json_error=None):
        self.payload = payload
        self.status_code = status_code
        self.json_error = json_error

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")

    def json(self):
        if self.json_error is not None:
            raise self.json_error
        return self.payload


class FakeSession:
    def __init__(self, response=None, exc=None):
        self.headers = {}
        self.response = response
        self.exc = exc
        self.requests = []

    def get(self, url, params=None, timeout=None):
        self.requests.append((url, params, timeout))
        if self.exc is not None:
            raise self.exc
        return self.response


def test_qrng_source_requests_uint8_bytes():
    session = FakeSession(FakeResponse({"type": "uint8", "length": 4, "data": [1, 2, 3, 250], "success": True}))
    source = QrngByteSource("https://qrng.example/API/jsonI.php", timeout_seconds=5.0, session=session)

    assert source(4) == [1, 2, 3, 250]
    assert session.requests == [("https://qrng.example/API/jsonI.php", {"length": 4, "type": "uint8"}, 5.0)]


def test_qrng_source_sends_api_key():
    session = FakeSession(FakeResponse({"data": [7]}))
    QrngByteSource(api_key="secret", session=session)
    assert session.headers["x-api-key"] == "secret"


def test_qrng_transport_failure():
    source = QrngByteSource(session=FakeSession(exc=requests.ConnectionError("no route")))
    with pytest.raises(RandomSourceError) as info:
        source(4)
    assert info.value.code == "random_source_failure"
    assert info.value.status_code == 502


def test_qrng_http_error():
    source = QrngByteSource(session=FakeSession(FakeResponse(status_code=503)))
    with pytest.raises(RandomSourceError):
        source(4)


def test_qrng_malformed_json():
    source = QrngByteSource(session=FakeSession(FakeResponse(json_error=ValueError("bad json"))))
    with pytest.raises(RandomSourceError, match="malformed JSON"):
        source(4)


@pytest.mark.parametrize(
    "payload",
    [
        {"success": False, "message": "rate limited"},
        {"success": True},
        {"data": [1, 2, 3]},
        {"data": [1, 2, 3, 256]},
        {"data": [1, 2, 3, "4"]},
        ["not", "an", "object"],
    ],
)
def test_qrng_rejects_bad_payloads(payload):
    source = QrngByteSource(session=FakeSession(FakeResponse(payload)))
    with pytest.raises(RandomSourceError):
        source(4)


def test_validate_payload_rejects_booleans():
    with pytest.raises(RandomSourceError):
        validate_payload([True], 1)


def test_system_source_returns_requested_bytes():
    data = SystemByteSource()(16)
    assert len(data) == 16
    assert all(0 <= b <= 255 for b in data)


def test_build_byte_source_selects_backend():
    assert isinstance(build_byte_source({"RANDOM_SOURCE": "system"}), SystemByteSource)
    assert isinstance(build_byte_source({"RANDOM_SOURCE": " QRNG "}), QrngByteSource)
    with pytest.raises(ValueError):
        build_byte_source({"RANDOM_SOURCE": "dice"})


def test_app_uses_configured_source():
    app = create_app({"TESTING": True, "RANDOM_SOURCE": "system"})
    with app.app_context():
        assert isinstance(get_byte_source(), SystemByteSource)
