from termfm.paths import APP_NAME, config_dir, state_dir


def test_absolute_xdg_config_home_is_used(tmp_path):
    assert config_dir({"XDG_CONFIG_HOME": str(tmp_path)}) == tmp_path / APP_NAME


def test_relative_xdg_config_home_falls_back_to_home(tmp_path):
    env = {"XDG_CONFIG_HOME": "relative/dir", "HOME": str(tmp_path)}
    assert config_dir(env) == tmp_path / ".config" / APP_NAME


def test_absolute_xdg_state_home_is_used(tmp_path):
    assert state_dir({"XDG_STATE_HOME": str(tmp_path)}) == tmp_path / APP_NAME


def test_state_dir_falls_back_to_home(tmp_path):
    env = {"HOME": str(tmp_path)}
    assert state_dir(env) == tmp_path / ".local" / "state" / APP_NAME