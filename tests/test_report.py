import json

from preload_hints.engine import Engine
from preload_hints.report import render_html, render_json


def make_plan(make_config, page_html):
    html = page_html('<img src="/data/a.png" data-preload><script src="https://other.net/x.js"></script>')
    return Engine(make_config(preload_mode="manual", preconnect_enabled=True)).plan(html, "page_view")


def test_render_json(tmp_path, make_config, page_html):
    path = render_json(make_plan(make_config, page_html), tmp_path / "nested" / "plan.json")
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["policy"]["preload_mode"] == "manual"
    assert data["preload"][0]["path"] == "/data/a.png"
    assert data["hosts"][0]["host"] == "other.net"


def test_render_html_default_template(tmp_path, make_config, page_html):
    path = render_html(make_plan(make_config, page_html), None, tmp_path / "plan.html")
    content = path.read_text(encoding="utf-8")
    assert "Preload (1)" in content
    assert "Preconnect (1)" in content
    assert "/data/a.png" in content


def test_render_html_custom_template(tmp_path, make_config, page_html):
    tpl_dir = tmp_path / "tpl"
    tpl_dir.mkdir()
    (tpl_dir / "report.html.j2").write_text("{{ template_name }}:{{ preload|length }}", encoding="utf-8")
    path = render_html(make_plan(make_config, page_html), tpl_dir, tmp_path / "plan.html")
    assert path.read_text(encoding="utf-8") == "page_view:1"
