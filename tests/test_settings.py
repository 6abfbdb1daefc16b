import pytest

from pathlab.app import settings


def test_defaults_without_overrides() -> None:
    cfg = settings.resolve([], environ={})
    assert cfg["GRID_ROWS"] == 20
    assert cfg["GRID_COLS"] == 20
    assert cfg["CELL_SIZE"] == 30
    assert cfg["STEPS_PER_SEC"] == 10
    assert cfg["DEFAULT_ALGO"] == "BFS"
    assert cfg["LOG_LEVEL"] == "INFO"


def test_environment_overrides_defaults() -> None:
    cfg = settings.resolve([], environ={"PATHLAB_ROWS": "12", "PATHLAB_ALGO": "A*",
                                        "PATHLAB_LOG_LEVEL": "debug"})
    assert cfg["GRID_ROWS"] == 12
    assert cfg["DEFAULT_ALGO"] == "A*"
    assert cfg["LOG_LEVEL"] == "DEBUG"


def test_flags_override_environment() -> None:
    cfg = settings.resolve(["--rows=8", "--cell-size=16", "--algo=Dijkstra"],
                           environ={"PATHLAB_ROWS": "12"})
    assert cfg["GRID_ROWS"] == 8
    assert cfg["CELL_SIZE"] == 16
    assert cfg["DEFAULT_ALGO"] == "Dijkstra"


def test_speed_is_capped() -> None:
    cfg = settings.resolve(["--speed=500"], environ={})
    assert cfg["STEPS_PER_SEC"] == settings.MAX_STEPS_PER_SEC


@pytest.mark.parametrize("flag", ["--rows=abc", "--cols=0", "--speed=-3"])
def test_bad_numbers_are_rejected(flag: str) -> None:
    with pytest.raises(ValueError):
        settings.resolve([flag], environ={})


def test_resolve_does_not_mutate_module_defaults() -> None:
    settings.resolve(["--rows=5"], environ={})
    assert settings.GRID_ROWS == 20


@pytest.mark.parametrize("environ", [{"PATHLAB_LOG_LEVEL": "foo"}, {"PATHLAB_LOG_LEVEL": ""}])
def test_unknown_log_level_is_rejected(environ: dict) -> None:
    with pytest.raises(ValueError):
        settings.resolve([], environ=environ)


def test_log_level_flag_is_case_insensitive() -> None:
    assert settings.resolve(["--log-level=warning"], environ={})["LOG_LEVEL"] == "WARNING"
