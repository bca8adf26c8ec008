import os

from restwrap_cli import config


def _use_tmp_config_dir(monkeypatch, tmp_path) -> None:
    def _config_dir(_: str) -> str:
        return str(tmp_path)

    monkeypatch.setattr(config, "user_config_dir", _config_dir)


def test_load_config_defaults_when_missing(tmp_path, monkeypatch) -> None:
    _use_tmp_config_dir(monkeypatch, tmp_path)

    cfg = config.load_config()

    assert cfg.host == config.DEFAULT_HOST
    assert cfg.bearer_token_key == config.DEFAULT_TOKEN_KEY


def test_save_and_load_config(tmp_path, monkeypatch) -> None:
    _use_tmp_config_dir(monkeypatch, tmp_path)
    cfg = config.AppConfig(host="http://www.example.com", bearer_token_key="my_token")

    path = config.save_config(cfg)
    contents = tmp_path.joinpath("config.toml").read_text(encoding="utf-8")

    assert path.endswith("config.toml")
    assert 'host = "http://www.example.com"' in contents
    assert config.load_config() == cfg


def test_from_toml_fills_blank_values() -> None:
    cfg = config.from_toml({"host": "", "bearer_token_key": "  "})
    assert cfg.host == config.DEFAULT_HOST
    assert cfg.bearer_token_key == config.DEFAULT_TOKEN_KEY


def test_resolve_host_env_override(monkeypatch) -> None:
    cfg = config.default_config()
    monkeypatch.setenv(config.ENV_HOST, "http://127.0.0.1:9000/")
    assert config.resolve_host(cfg) == "http://127.0.0.1:9000"


def test_resolve_host_flag_beats_env(monkeypatch) -> None:
    cfg = config.default_config()
    monkeypatch.setenv(config.ENV_HOST, "http://127.0.0.1:9000")
    assert config.resolve_host(cfg, "https://api.example.com/") == "https://api.example.com"


def test_resolve_host_from_config(monkeypatch) -> None:
    cfg = config.AppConfig(host="https://api.example.com")
    monkeypatch.delenv(config.ENV_HOST, raising=False)
    assert config.resolve_host(cfg) == "https://api.example.com"


def test_normalize_host_defaults_to_https() -> None:
    assert config.normalize_host("example.com") == "https://example.com"


def test_normalize_host_defaults_to_http_for_localhost() -> None:
    assert config.normalize_host("127.0.0.1:8000") == "http://127.0.0.1:8000"


def test_normalize_host_strips_trailing_slash() -> None:
    assert config.normalize_host("https://example.com/") == "https://example.com"


def test_save_config_is_private_to_owner(tmp_path, monkeypatch) -> None:
    _use_tmp_config_dir(monkeypatch, tmp_path)
    path = config.save_config(config.default_config())
    assert os.stat(path).st_mode & 0o777 == 0o600


def test_missing_scheme_warning_skipped_when_not_interactive(monkeypatch, capsys) -> None:
    monkeypatch.setattr(config, "_WARNED_HOST_SCHEME", False)
    monkeypatch.setattr(config, "_is_interactive", lambda: False)

    assert config.normalize_host("example.com", warn=True) == "https://example.com"

    assert "WARN" not in capsys.readouterr().out
    assert config._WARNED_HOST_SCHEME is False
