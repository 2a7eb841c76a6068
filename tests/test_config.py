import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from preload_hints.config import OptimizeConfig, PreloadMode, load_config


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("preload_mode: manual\nboard_url: https://example.com/", ".yaml", None),
        (json.dumps({"preload_mode": "manual", "board_url": "https://example.com"}), ".json", None),
        ("preload_mode: sometimes", ".yaml", ValidationError),
        ("unknown_key: 1", ".yaml", ValidationError),
        ("key: [unclosed", ".yaml", ValueError),
        ("- a\n- b", ".yaml", TypeError),
        ("{not json", ".json", ValueError),
        ("preload_mode = manual", ".toml", ValueError),
    ],
)
def test_load_config_variants(tmp_path, content, suffix, expect_exc):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, OptimizeConfig)
        assert cfg.preload_mode is PreloadMode.MANUAL
        assert cfg.board_url == "https://example.com"


def test_load_config_default_missing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(FileNotFoundError):
        load_config(None)


def test_load_config_default_present(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text("preconnect_enabled: true\n", encoding="utf-8")
    assert load_config(None).preconnect_enabled is True


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_defaults():
    cfg = OptimizeConfig()
    assert cfg.preconnect_enabled is False
    assert cfg.preload_mode is PreloadMode.OFF
    assert cfg.priority_templates_extra == []
    assert cfg.board_url is None
    assert cfg.per_page_limit is None


def test_priority_templates_from_textarea():
    cfg = OptimizeConfig(priority_templates_extra="forum_list\n\n  category_view \n")
    assert cfg.priority_templates_extra == ["forum_list", "category_view"]


def test_empty_board_url_is_unset():
    assert OptimizeConfig(board_url="  ").board_url is None


@pytest.mark.parametrize(
    "enabled,count,expected",
    [(True, 2, 2), (False, 2, None), (True, 0, None)],
)
def test_per_page_limit(enabled, count, expected):
    cfg = OptimizeConfig(per_page_limit_enabled=enabled, per_page_limit_count=count)
    assert cfg.per_page_limit == expected


def test_negative_limit_rejected():
    with pytest.raises(ValidationError):
        OptimizeConfig(per_page_limit_count=-1)


def test_config_is_frozen():
    cfg = OptimizeConfig()
    with pytest.raises(ValidationError):
        cfg.preconnect_enabled = True
