import pytest

from termfm.errors import ConfigError
from termfm.settings import LogConfig, TasksConfig


def test_tasks_load():
    config = TasksConfig.load("[tasks]\nmicro_workers = 5\nmacro_workers = 10\nbizarre_retry = 5\n")
    assert config == TasksConfig(micro_workers=5, macro_workers=10, bizarre_retry=5)


def test_tasks_minimums_accepted():
    config = TasksConfig.from_dict({"micro_workers": 3, "macro_workers": 5, "bizarre_retry": 3})
    assert (config.micro_workers, config.macro_workers, config.bizarre_retry) == (3, 5, 3)


@pytest.mark.parametrize(
    "data, message",
    [
        ({"micro_workers": 2, "macro_workers": 5, "bizarre_retry": 3}, "less than 3"),
        ({"micro_workers": 3, "macro_workers": 4, "bizarre_retry": 3}, "less than 5"),
        ({"micro_workers": 3, "macro_workers": 5, "bizarre_retry": 0}, "bizarre_retry"),
        ({"micro_workers": 300, "macro_workers": 5, "bizarre_retry": 3}, "0 to 255"),
        ({"macro_workers": 5, "bizarre_retry": 3}, "micro_workers"),
    ],
)
def test_tasks_errors(data, message):
    with pytest.raises(ConfigError, match=message):
        TasksConfig.from_dict(data)


def test_tasks_missing_section():
    with pytest.raises(ConfigError):
        TasksConfig.load("[log]\nenabled = true\n")


@pytest.mark.parametrize("flag", [True, False])
def test_log_load(flag):
    assert LogConfig.load(f"[log]\nenabled = {str(flag).lower()}\n").enabled is flag


def test_log_rejects_non_bool():
    with pytest.raises(ConfigError):
        LogConfig.from_dict({"enabled": "yes"})