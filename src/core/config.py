import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Optional

from dotenv import find_dotenv, load_dotenv


_DEFAULT_BASE_URL = "https://api.football-data.org/v4"


def _load_dotenv() -> None:
    # .env opzionale; l'ambiente del processo ha sempre la precedenza
    path = find_dotenv(usecwd=True)
    if path:
        load_dotenv(path, override=False)


def _clean(value: Optional[str]) -> str:
    return (value or "").strip().strip("'\"")


@dataclass
class Settings:
    football_data_api_key: str = field(repr=False)
    football_data_base_url: str
    football_data_timeout: float
    default_league: str
    cache_s_maxage: int
    cache_stale_while_revalidate: int

    @classmethod
    def from_env(cls) -> "Settings":
        _load_dotenv()

        key = _clean(os.getenv("FOOTBALL_DATA_API_KEY"))
        if not key:
            raise ValueError(
                "FOOTBALL_DATA_API_KEY non impostata. Aggiungi a .env: FOOTBALL_DATA_API_KEY=LA_TUA_CHIAVE"
            )

        def _int(name: str, default: int) -> int:
            raw = os.getenv(name)
            if not raw:
                return default
            try:
                return int(raw)
            except ValueError as e:
                raise ValueError(f"Variabile {name} deve essere un intero (valore: {raw!r})") from e

        def _float(name: str, default: float) -> float:
            raw = os.getenv(name)
            if not raw:
                return default
            try:
                return float(raw)
            except ValueError as e:
                raise ValueError(f"Variabile {name} deve essere un numero (valore: {raw!r})") from e

        base_url = _clean(os.getenv("FOOTBALL_DATA_BASE_URL")) or _DEFAULT_BASE_URL
        timeout = _float("FOOTBALL_DATA_TIMEOUT", 5.0)
        if timeout <= 0:
            raise ValueError(f"Variabile FOOTBALL_DATA_TIMEOUT deve essere > 0 (valore: {timeout!r})")

        default_league = _clean(os.getenv("FIXTURES_DEFAULT_LEAGUE")).upper() or "PL"

        s_maxage = max(0, _int("FIXTURES_CACHE_S_MAXAGE", 300))
        swr = max(0, _int("FIXTURES_CACHE_SWR", 60))

        return cls(
            football_data_api_key=key,
            football_data_base_url=base_url.rstrip("/"),
            football_data_timeout=timeout,
            default_league=default_league,
            cache_s_maxage=s_maxage,
            cache_stale_while_revalidate=swr,
        )

    @property
    def cache_control(self) -> str:
        return f"s-maxage={self.cache_s_maxage}, stale-while-revalidate={self.cache_stale_while_revalidate}"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


def _reset_settings_cache_for_tests() -> None:
    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "_reset_settings_cache_for_tests"]
