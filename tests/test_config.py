# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError
from robots_scout.config import RobotsConfig, load_config


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("user_agent: Bot/1.0\ntimeout: 3", ".yaml", None),
        ("user_agent: Bot/1.0\ntimeout: 3", ".yml", None),
        (json.dumps({"user_agent": "Bot/1.0", "timeout": 3}), ".json", None),
        ("timeout: -1", ".yaml", ValidationError),
        ("unknown_key: 1", ".yaml", ValidationError),
        ("user_agent: '   '", ".yaml", ValidationError),
        ("not: a: mapping", ".yaml", ValueError),
        ("- just\n- a list", ".yaml", TypeError),
        ("{broken json", ".json", ValueError),
        ("[1, 2]", ".json", TypeError),
        ("user_agent = 'x'", ".toml", ValueError),
    ],
)
def test_load_config_variants(tmp_path, content, suffix, expect_exc):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, RobotsConfig)
        assert cfg.user_agent == "Bot/1.0"
        assert cfg.timeout == 3.0


def test_defaults():
    cfg = RobotsConfig()
    assert cfg.user_agent == "RobotsScout/1.0"
    assert cfg.timeout == 10.0
    assert cfg.max_bytes == 512_000
    assert cfg.allow_on_missing is True


def test_empty_file_gives_defaults(tmp_path):
    assert load_config(write_file(tmp_path, "", ".yaml")) == RobotsConfig()


def test_config_is_frozen():
    cfg = RobotsConfig()
    with pytest.raises(ValidationError):
        cfg.timeout = 1.0


def test_load_config_default_missing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(FileNotFoundError):
        load_config(None)


def test_load_config_default_present(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text("max_bytes: 2048\n", encoding="utf-8")
    assert load_config(None).max_bytes == 2048


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.yaml")


@pytest.mark.parametrize("suffix", [".yaml", ".json"])
def test_blank_file_gives_defaults(tmp_path, suffix):
    assert load_config(write_file(tmp_path, "  \n", suffix)) == RobotsConfig()


def test_unsupported_suffix_names_file(tmp_path):
    cfg_path = write_file(tmp_path, "user_agent = 'x'", ".ini")
    with pytest.raises(ValueError, match="config.ini"):
        load_config(cfg_path)
