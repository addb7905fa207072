import pytest

from core.config import get_settings, _reset_settings_cache_for_tests


def test_missing_api_key_raises(monkeypatch) -> None:
    monkeypatch.delenv("FOOTBALL_DATA_API_KEY", raising=False)
    _reset_settings_cache_for_tests()
    with pytest.raises(ValueError) as exc:
        get_settings()
    assert "FOOTBALL_DATA_API_KEY" in str(exc.value)


def test_present_api_key_ok(monkeypatch) -> None:
    monkeypatch.setenv("FOOTBALL_DATA_API_KEY", "TEST_KEY")
    _reset_settings_cache_for_tests()
    s = get_settings()
    assert s.football_data_api_key == "TEST_KEY"


def test_defaults(monkeypatch) -> None:
    monkeypatch.setenv("FOOTBALL_DATA_API_KEY", "TEST_KEY")
    for name in (
        "FOOTBALL_DATA_BASE_URL",
        "FOOTBALL_DATA_TIMEOUT",
        "FIXTURES_DEFAULT_LEAGUE",
        "FIXTURES_CACHE_S_MAXAGE",
        "FIXTURES_CACHE_SWR",
    ):
        monkeypatch.delenv(name, raising=False)
    s = get_settings()
    assert s.football_data_base_url == "https://api.football-data.org/v4"
    assert s.football_data_timeout == 5.0
    assert s.default_league == "PL"
    assert s.cache_control == "s-maxage=300, stale-while-revalidate=60"


def test_overrides(monkeypatch) -> None:
    monkeypatch.setenv("FOOTBALL_DATA_API_KEY", "TEST_KEY")
    monkeypatch.setenv("FOOTBALL_DATA_BASE_URL", "https://proxy.local/v4/")
    monkeypatch.setenv("FOOTBALL_DATA_TIMEOUT", "2.5")
    monkeypatch.setenv("FIXTURES_DEFAULT_LEAGUE", "sa")
    monkeypatch.setenv("FIXTURES_CACHE_S_MAXAGE", "120")
    s = get_settings()
    assert s.football_data_base_url == "https://proxy.local/v4"
    assert s.football_data_timeout == 2.5
    assert s.default_league == "SA"
    assert s.cache_control.startswith("s-maxage=120,")


def test_invalid_timeout_raises(monkeypatch) -> None:
    monkeypatch.setenv("FOOTBALL_DATA_API_KEY", "TEST_KEY")
    monkeypatch.setenv("FOOTBALL_DATA_TIMEOUT", "veloce")
    with pytest.raises(ValueError) as exc:
        get_settings()
    assert "FOOTBALL_DATA_TIMEOUT" in str(exc.value)


def test_api_key_not_in_repr(monkeypatch) -> None:
    monkeypatch.setenv("FOOTBALL_DATA_API_KEY", "SUPER_SECRET")
    s = get_settings()
    assert "SUPER_SECRET" not in repr(s)


def test_settings_cached(monkeypatch) -> None:
    monkeypatch.setenv("FOOTBALL_DATA_API_KEY", "TEST_KEY")
    assert get_settings() is get_settings()
