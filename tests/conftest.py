import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest  # noqa: E402
from core.config import _reset_settings_cache_for_tests  # noqa: E402


class FakeResponse:
    def __init__(self, status_code=200, json_data=None, reason="OK", headers=None, text=""):
        self.status_code = status_code
        self._json_data = json_data
        self.reason = reason
        self.headers = headers or {}
        self.text = text or (json.dumps(json_data) if isinstance(json_data, (dict, list)) else "")

    def json(self):
        if self._json_data is None:
            raise ValueError("Invalid JSON")
        return self._json_data


class FakeUpstream:
    """
    Sostituto di requests.Session.get: risponde in base al suffisso dell'URL
    e registra ogni chiamata (url, params, timeout, headers).
    """

    def __init__(self, routes):
        self.routes = routes
        self.calls = []

    def __call__(self, session, url, params=None, timeout=None, **kwargs):
        self.calls.append(
            {"url": url, "params": params, "timeout": timeout, "headers": dict(session.headers)}
        )
        for suffix, item in self.routes.items():
            if url.endswith(suffix):
                if isinstance(item, Exception):
                    raise item
                return item
        raise AssertionError(f"URL inattesa: {url}")

    def urls(self):
        return [c["url"] for c in self.calls]


@pytest.fixture(autouse=True)
def reset_settings_cache():
    _reset_settings_cache_for_tests()
    yield
    _reset_settings_cache_for_tests()


@pytest.fixture
def api_env(monkeypatch):
    monkeypatch.setenv("FOOTBALL_DATA_API_KEY", "SECRET_TEST_KEY")
    monkeypatch.setenv("FOOTBALL_DATA_BASE_URL", "https://fd.test/v4")
    monkeypatch.delenv("FIXTURES_DEFAULT_LEAGUE", raising=False)
    monkeypatch.delenv("FOOTBALL_DATA_TIMEOUT", raising=False)
    _reset_settings_cache_for_tests()
    yield
    _reset_settings_cache_for_tests()


@pytest.fixture
def fake_upstream(monkeypatch):
    def _install(routes):
        fake = FakeUpstream(routes)

        def _get(session, url, params=None, timeout=None, **kwargs):
            return fake(session, url, params=params, timeout=timeout, **kwargs)

        monkeypatch.setattr(
            "providers.football_data.http_client.requests.Session.get",
            _get,
        )
        return fake

    return _install
