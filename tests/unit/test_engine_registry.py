"""Unit tests for the engine registry and Settings validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from metasearch.config.settings import Settings
from metasearch.engines import ENGINES, DuckDuckGo, Qwant, available_engines, get_engine
from metasearch.interfaces.search_engine import SearchEngine
from metasearch.utils.errors import ConfigurationError, UnexpectedError


class TestRegistry:
    def test_available_engines(self) -> None:
        assert available_engines() == ["duckduckgo", "qwant"]

    def test_registered_classes_implement_contract(self) -> None:
        for name, engine_cls in ENGINES.items():
            assert issubclass(engine_cls, SearchEngine)
            assert engine_cls.name == name

    @pytest.mark.parametrize(("name", "cls"), [("qwant", Qwant), (" QWANT ", Qwant), ("DuckDuckGo", DuckDuckGo)])
    def test_get_engine_case_insensitive(self, name: str, cls: type[SearchEngine]) -> None:
        assert isinstance(get_engine(name), cls)

    def test_get_engine_forwards_kwargs(self) -> None:
        assert "timeout=2.5" in repr(get_engine("qwant", timeout=2.5))

    def test_get_engine_propagates_selector_errors(self) -> None:
        with pytest.raises(UnexpectedError):
            get_engine("qwant", results_selector="div[")

    def test_unknown_engine(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            get_engine("altavista")
        assert "altavista" in str(exc_info.value)
        assert "qwant" in str(exc_info.value)

    def test_abstract_contract_cannot_be_instantiated(self) -> None:
        with pytest.raises(TypeError):
            SearchEngine(parser=None)  # type: ignore[abstract]


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for var in ("ENGINES", "SAFE_SEARCH", "REQUEST_TIMEOUT", "LOG_LEVEL", "USER_AGENT"):
            monkeypatch.delenv(var, raising=False)
        settings = Settings(_env_file=None)
        assert settings.engines == ["qwant", "duckduckgo"]
        assert settings.request_timeout == 30.0
        assert settings.safe_search == 1
        assert settings.user_agent.startswith("Mozilla/5.0")

    def test_engine_names_normalized(self) -> None:
        assert Settings(_env_file=None, engines=[" Qwant ", "DUCKDUCKGO"]).engines == [
            "qwant",
            "duckduckgo",
        ]

    def test_unknown_engine_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, engines=["qwant", "altavista"])

    def test_empty_engine_list_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, engines=[])

    @pytest.mark.parametrize("level", [-1, 5])
    def test_safe_search_range(self, level: int) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, safe_search=level)

    def test_log_level_normalized(self) -> None:
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    @pytest.mark.parametrize("level", ["VERBOSE", "trace", ""])
    def test_unknown_log_level_rejected(self, level: str) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level=level)

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENGINES", '["duckduckgo"]')
        monkeypatch.setenv("REQUEST_TIMEOUT", "7.5")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        settings = Settings(_env_file=None)
        assert settings.engines == ["duckduckgo"]
        assert settings.request_timeout == 7.5
        assert settings.log_level == "DEBUG"
