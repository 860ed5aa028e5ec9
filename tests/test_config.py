# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from robots_scout.config import CheckerConfig, load_config


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture()
def robots_in_tmp(tmp_path, sample_robots) -> Path:
    path = tmp_path / "robots.txt"
    path.write_text(sample_robots, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("robots_file: robots.txt\nuser_agent: FooBot\nurls: [https://example.com/]", ".yaml", None),
        (json.dumps({"robots_file": "robots.txt", "urls": ["/a"]}), ".json", None),
        ("{}", ".json", ValidationError),
        ("robots_file: robots.txt\nuser_agent: FooBot\nunexpected: 1", ".yaml", ValidationError),
        ("robots_file: robots.txt\nuser_agent: '   '", ".yaml", ValidationError),
        ("not: a: mapping", ".yaml", ValueError),
        ("- just\n- a list", ".yaml", TypeError),
        ("{broken", ".json", ValueError),
        ("robots_file = 'robots.txt'", ".toml", ValueError),
    ],
)
def test_load_config_variants(tmp_path, robots_in_tmp, content, suffix, expect_exc):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, CheckerConfig)
        assert cfg.robots_file == robots_in_tmp.resolve()


def test_defaults(write_config):
    cfg = load_config(write_config())
    assert cfg.user_agent == "FooBot"
    assert cfg.reduce_user_agent is True
    assert cfg.fail_on_disallow is False
    assert cfg.urls == ["https://example.com/", "https://example.com/public/"]


def test_user_agent_is_stripped_and_blank_urls_dropped(write_config):
    cfg = load_config(write_config(user_agent="  FooBot/1.0 ", urls=[" /a ", "", "   "]))
    assert cfg.user_agent == "FooBot/1.0"
    assert cfg.urls == ["/a"]


def test_config_is_frozen(write_config):
    cfg = load_config(write_config())
    with pytest.raises(ValidationError):
        cfg.user_agent = "Other"


def test_robots_file_not_found(tmp_path):
    cfg_path = write_file(tmp_path, "robots_file: missing.txt", ".yaml")
    with pytest.raises(FileNotFoundError):
        load_config(cfg_path)


def test_config_file_not_found(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.yaml")


def test_load_config_default_missing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(FileNotFoundError):
        load_config(None)


def test_load_config_default(tmp_path, monkeypatch, robots_in_tmp):
    configs = tmp_path / "configs"
    configs.mkdir()
    (configs / "robots.txt").write_text(robots_in_tmp.read_text(encoding="utf-8"), encoding="utf-8")
    (configs / "default.yaml").write_text("robots_file: robots.txt\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    cfg = load_config(None)
    assert cfg.robots_file == (configs / "robots.txt").resolve()
    assert cfg.user_agent == "RobotsScout"
