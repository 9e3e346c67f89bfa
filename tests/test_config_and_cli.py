import pytest

from gogar.config import Settings, get_settings
from gogar.main import build_parser
from gogar.scorekeeping import Agent, Game


def test_settings_read_from_prefixed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GOGAR_DEFAULT_INTELLIGENCE", "3")
    monkeypatch.setenv("GOGAR_SEED_AGENTS", '["Cy", "Di"]')
    monkeypatch.setenv("GOGAR_DEFAULT_PERMISSIVE_INFERENCES", "[]")

    settings = Settings()
    assert settings.default_intelligence == 3
    assert settings.seed_agents == ["Cy", "Di"]

    get_settings.cache_clear()
    game = Game()
    game.new_game()
    assert [a.name for a in game.agents] == ["Cy", "Di"]
    assert game.get_agent("cy").intelligence == 3
    assert len(game.get_agent("cy").permissive_inferences) == 0


def test_negative_default_intelligence_is_invalid(monkeypatch: pytest.MonkeyPatch) -> None:
    from pydantic import ValidationError

    monkeypatch.setenv("GOGAR_DEFAULT_INTELLIGENCE", "-1")
    with pytest.raises(ValidationError):
        Settings()


def test_explicit_seed_rules_override_settings() -> None:
    agent = Agent("Cy", committive=[(["p"], "q")], permissive=[], incompatibles=[["p", "r"]], intelligence=7)
    assert agent.intelligence == 7
    assert len(agent.committive_inferences) == 1
    assert len(agent.incompatibilities) == 1


def test_web_flag_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GOGAR_WEB_PORT", "9999")

    assert build_parser().parse_args([]).web is None
    assert build_parser().parse_args(["--web"]).web == 9999
    assert build_parser().parse_args(["-w", "8080"]).web == 8080


def test_version_flag_exits(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args(["--version"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.startswith("gogar ")


def test_debug_setting_reaches_web_app(monkeypatch: pytest.MonkeyPatch) -> None:
    from gogar.web import create_app

    assert create_app("sqlite+aiosqlite://").debug is False

    monkeypatch.setenv("GOGAR_DEBUG", "true")
    get_settings.cache_clear()
    assert create_app("sqlite+aiosqlite://").debug is True
