"""Random byte sources + per-app source management.

The draw pipeline only needs ``source(count) -> list[int]``; sources are
registered on the Flask app so tests can swap in fixed byte sequences.
"""

from __future__ import annotations

import logging
import secrets
from collections.abc import Mapping
from typing import Any, Protocol

import requests
from flask import Flask, current_app
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from quantum_lottery.errors import RandomSourceError

logger = logging.getLogger(__name__)


class ByteSource(Protocol):
    name: str

    def __call__(self, count: int) -> list[int]: ...


def validate_payload(data: Any, count: int) -> list[int]:
    """Check that ``data`` holds exactly ``count`` unsigned bytes."""

    if not isinstance(data, list):
        raise RandomSourceError(message="Random source returned no byte array", details={"data": repr(data)})
    if len(data) != count:
        raise RandomSourceError(
            message=f"Random source returned {len(data)} bytes, expected {count}",
            details={"expected": count, "received": len(data)},
        )
    values: list[int] = []
    for value in data:
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
            raise RandomSourceError(message="Random source returned a non-byte value", details={"value": repr(value)})
        values.append(value)
    return values


def _build_http_session(retries: int, backoff_factor: float) -> requests.Session:
    """Create a requests session with retry/backoff for transient network errors."""

    retry = Retry(
        total=retries,
        connect=retries,
        read=retries,
        status=retries,
        backoff_factor=backoff_factor,
        status_forcelist=(429, 500, 502, 503, 504),
        allowed_methods=("GET",),
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry)

    session = requests.Session()
    session.headers.update({"Accept": "application/json"})
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


class QrngByteSource:
    """Bytes from the ANU quantum random number generator JSON API."""

    name = "qrng"

    def __init__(
        self,
        url: str = "https://qrng.anu.edu.au/API/jsonI.php",
        *,
        timeout_seconds: float = 10.0,
        retries: int = 0,
        backoff_factor: float = 0.3,
        api_key: str | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._url = url
        self._timeout = timeout_seconds
        self._http = session or _build_http_session(retries, backoff_factor)
        if api_key:
            self._http.headers["x-api-key"] = api_key

    def __call__(self, count: int) -> list[int]:
        logger.debug("Requesting %d bytes from %s", count, self._url)
        try:
            resp = self._http.get(
                self._url,
                params={"length": count, "type": "uint8"},
                timeout=self._timeout,
            )
            resp.raise_for_status()
        except requests.RequestException as exc:
            logger.warning("QRNG request failed: %s", exc)
            raise RandomSourceError(message="Could not reach the quantum random number service", details=str(exc)) from exc

        try:
            payload = resp.json()
        except ValueError as exc:
            logger.warning("QRNG returned malformed JSON: %s", exc)
            raise RandomSourceError(message="Quantum random number service returned malformed JSON") from exc

        if not isinstance(payload, dict):
            raise RandomSourceError(message="Unexpected QRNG response", details={"payload": repr(payload)})
        if payload.get("success") is False:
            raise RandomSourceError(
                message="Quantum random number service reported a failure",
                details={"message": payload.get("message")},
            )

        return validate_payload(payload.get("data"), count)


class SystemByteSource:
    """Bytes from the operating system CSPRNG; offline fallback."""

    name = "system"

    def __call__(self, count: int) -> list[int]:
        return list(secrets.token_bytes(count))


def build_byte_source(config: Mapping[str, Any]) -> ByteSource:
    """Build the byte source selected by ``RANDOM_SOURCE``."""

    backend = str(config.get("RANDOM_SOURCE", "qrng")).lower().strip()
    if backend == "system":
        return SystemByteSource()
    if backend == "qrng":
        return QrngByteSource(
            str(config.get("QRNG_URL", "https://qrng.anu.edu.au/API/jsonI.php")),
            timeout_seconds=float(config.get("QRNG_TIMEOUT", 10.0)),
            retries=int(config.get("QRNG_RETRIES", 0)),
            backoff_factor=float(config.get("QRNG_BACKOFF", 0.3)),
            api_key=config.get("QRNG_API_KEY"),
        )
    raise ValueError(f"Unknown RANDOM_SOURCE: {backend!r} (expected 'qrng' or 'system')")


def init_random_source(app: Flask, source: ByteSource | None = None) -> None:
    """Register the byte source used by draw requests."""

    app.extensions["byte_source"] = source or build_byte_source(app.config)


def get_byte_source() -> ByteSource:
    """Get the current app's byte source."""

    source: ByteSource | None = current_app.extensions.get("byte_source")
    if source is None:
        raise RuntimeError("Random source not initialized")
    return source
