"""Тесты для CLI (`preload_hints.cli`) с использованием click.testing.CliRunner.
Проверяют команды `process`, `plan`, `config`, `--version`, а также обработку ошибок.
"""
import json

import pytest
from click.testing import CliRunner

import preload_hints.cli as cli_module
from preload_hints.cli import cli
from preload_hints.exceptions import FetchError
from preload_hints.fetcher import PageData

PAGE = (
    '<html><head><title>T</title></head><body>'
    '<img src="/data/x.png" data-preload>'
    '<script src="https://other.net/a.js"></script>'
    '</body></html>'
)


@pytest.fixture()
def cfg_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "preconnect_enabled: true\npreload_mode: manual\nboard_url: https://example.com\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture()
def page_file(tmp_path):
    path = tmp_path / "page.html"
    path.write_text(PAGE, encoding="utf-8")
    return path


def test_version_option():
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "PreloadHints" in result.output


def test_show_config(cfg_file):
    runner = CliRunner()
    result = runner.invoke(cli, ["--config", str(cfg_file), "config"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["board_url"] == "https://example.com"
    assert data["preload_mode"] == "manual"


def test_bad_config_exits(tmp_path):
    bad = tmp_path / "bad.yaml"
    bad.write_text("preload_mode: sometimes\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(cli, ["--config", str(bad), "config"])
    assert result.exit_code == 1
    assert "Ошибка загрузки конфигурации" in result.output


def test_process_stdout(cfg_file, page_file):
    runner = CliRunner()
    result = runner.invoke(cli, ["--config", str(cfg_file), "process", str(page_file), "--template", "page_view"])
    assert result.exit_code == 0
    assert '<link rel="preload" data-from="data-preload" as="image" href="/data/x.png"></head>' in result.output
    assert '</title><link rel="preconnect" data-from="script" href="other.net">' in result.output


def test_process_stdin_with_host(tmp_path):
    cfg = tmp_path / "config.json"
    cfg.write_text(json.dumps({"preconnect_enabled": True}), encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(
        cli,
        ["--config", str(cfg), "process", "-", "--template", "page_view", "--host", "example.com"],
        input=PAGE,
    )
    assert result.exit_code == 0
    assert 'href="other.net"' in result.output


def test_process_output_file(cfg_file, page_file, tmp_path):
    out = tmp_path / "out" / "page.html"
    runner = CliRunner()
    result = runner.invoke(
        cli,
        ["--config", str(cfg_file), "process", str(page_file), "-t", "page_view", "-o", str(out)],
    )
    assert result.exit_code == 0
    assert 'rel="preload"' in out.read_text(encoding="utf-8")


def test_process_without_site_host_fails(page_file):
    runner = CliRunner()
    result = runner.invoke(cli, ["process", str(page_file), "--template", "page_view"])
    assert result.exit_code == 1
    assert "Ошибка обработки" in result.output


def test_process_missing_file(cfg_file, tmp_path):
    runner = CliRunner()
    result = runner.invoke(
        cli, ["--config", str(cfg_file), "process", str(tmp_path / "none.html"), "-t", "page_view"]
    )
    assert result.exit_code == 1
    assert "Ошибка чтения страницы" in result.output


def test_process_url_uses_page_host(monkeypatch):
    async def fake_fetch(url, cfg):
        return PageData(url, PAGE)

    monkeypatch.setattr(cli_module, "fetch_page", fake_fetch)
    runner = CliRunner()
    result = runner.invoke(cli, ["process", "https://example.com/pages/about", "--template", "page_view"])
    assert result.exit_code == 0
    # defaults: nothing enabled, page passes through untouched
    assert result.output == PAGE


def test_process_url_fetch_error(monkeypatch):
    async def failing_fetch(url, cfg):
        raise FetchError(url, "404 Not Found")

    monkeypatch.setattr(cli_module, "fetch_page", failing_fetch)
    runner = CliRunner()
    result = runner.invoke(cli, ["process", "https://example.com/missing", "--template", "page_view"])
    assert result.exit_code == 1
    assert "404 Not Found" in result.output


def test_plan_stdout(cfg_file, page_file):
    runner = CliRunner()
    result = runner.invoke(cli, ["--config", str(cfg_file), "plan", str(page_file), "-t", "page_view", "--pretty"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert [a["path"] for a in data["preload"]] == ["/data/x.png"]
    assert data["hosts"] == [{"host": "other.net", "source": "script"}]


def test_plan_reports(cfg_file, page_file, tmp_path):
    json_out = tmp_path / "plan.json"
    html_out = tmp_path / "plan.html"
    runner = CliRunner()
    result = runner.invoke(
        cli,
        [
            "--config", str(cfg_file),
            "plan", str(page_file), "-t", "page_view",
            "--json", str(json_out), "--html", str(html_out),
        ],
    )
    assert result.exit_code == 0
    assert json.loads(json_out.read_text(encoding="utf-8"))["site_host"] == "example.com"
    report = html_out.read_text(encoding="utf-8")
    assert "other.net" in report
    assert "&lt;link rel=&#34;preload&#34;" in report
