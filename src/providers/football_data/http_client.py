from __future__ import annotations

import re
import time
from typing import Any, Dict, Optional

import requests

from core.config import Settings, get_settings
from core.logging import get_logger
from .exceptions import InvalidPayloadError, UpstreamAPIError, UpstreamTimeoutError

log = get_logger(__name__)

_TOKEN_PATTERN = re.compile(r"X-Auth-Token[:=\s]+[A-Za-z0-9._-]+")


def sanitize_error_message(message: Any, api_key: Optional[str] = None) -> str:
    """Rimuove la chiave API da un messaggio di errore prima di loggarlo o restituirlo."""
    text = _TOKEN_PATTERN.sub("X-Auth-Token: ***", str(message))
    if api_key:
        text = text.replace(api_key, "***")
    return text


class FootballDataClient:
    """
    Client HTTP per football-data.org v4 (requests).
    Una sola chiamata per richiesta: nessun retry, timeout obbligatorio.

    Telemetria dell'ultima chiamata:
      - _last_path: path richiesto
      - _last_status: ultimo HTTP status code (None se nessuna risposta)
      - _last_latency_ms: durata in millisecondi
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._base_url = self._settings.football_data_base_url
        self._timeout = self._settings.football_data_timeout
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "X-Auth-Token": self._settings.football_data_api_key,
                "Accept": "application/json",
                "Content-Type": "application/json",
            }
        )

        self._last_path: Optional[str] = None
        self._last_status: Optional[int] = None
        self._last_latency_ms: float = 0.0

    def _scrub(self, message: Any) -> str:
        return sanitize_error_message(message, self._settings.football_data_api_key)

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        url = f"{self._base_url}{path}"
        log.info("football_data GET %s params=%s", path, params, extra={"upstream": path})

        self._last_path = path
        self._last_status = None
        start = time.perf_counter()
        try:
            resp = self._session.get(url, params=params or {}, timeout=self._timeout)
        except requests.Timeout as e:
            self._last_latency_ms = (time.perf_counter() - start) * 1000
            raise UpstreamTimeoutError(
                f"Football API timeout after {self._timeout}s: {self._scrub(e)}"
            ) from e
        except requests.RequestException as e:
            self._last_latency_ms = (time.perf_counter() - start) * 1000
            raise UpstreamAPIError(f"Football API connection error: {self._scrub(e)}") from e

        self._last_latency_ms = (time.perf_counter() - start) * 1000
        self._last_status = resp.status_code

        if not 200 <= resp.status_code < 300:
            reason = getattr(resp, "reason", "") or ""
            raise UpstreamAPIError(
                f"Football API error: {resp.status_code} {reason}".strip(),
                status_code=resp.status_code,
            )

        try:
            data = resp.json()
        except ValueError as e:
            raise InvalidPayloadError(
                f"Risposta non valida (non JSON) status={resp.status_code}",
                status_code=resp.status_code,
            ) from e
        if not isinstance(data, dict):
            raise InvalidPayloadError(
                f"Risposta non valida (atteso oggetto JSON) status={resp.status_code}",
                status_code=resp.status_code,
            )
        return data

    def get_stats(self) -> Dict[str, Any]:
        return {
            "path": self._last_path,
            "latency_ms": round(self._last_latency_ms, 2),
            "last_status": self._last_status,
        }
