# File: preload_hints/report/html_report.py
"""preload_hints.report.html_report: Генерация HTML-отчёта с помощью Jinja2."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Union

from jinja2 import Environment, FileSystemLoader, select_autoescape

from preload_hints.engine import HintPlan
from preload_hints.injector import preconnect_tag, preload_tag

DEFAULT_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"


def render_html(
    plan: HintPlan,
    template_dir: Union[Path, str, None],
    output_path: Union[Path, str],
) -> Path:
    """Рендерит HTML-отчёт из шаблона и сохраняет его по указанному пути.

    Args:
        plan: объект HintPlan.
        template_dir: директория с Jinja2-шаблонами (None — шаблон из пакета).
        output_path: путь к итоговому HTML-файлу.

    Returns:
        Path до сохранённого HTML-файла.
    """
    template_dir = Path(template_dir) if template_dir else DEFAULT_TEMPLATE_DIR
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    env = Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=select_autoescape(["html", "xml", "j2"]),
    )
    template = env.get_template("report.html.j2")

    context: dict[str, Any] = {
        "template_name": plan.template,
        "site_host": plan.site_host,
        "policy": plan.policy.to_dict(),
        "preload": [dict(a.to_dict(), tag=preload_tag(a)) for a in plan.preload],
        "hosts": [dict(h.to_dict(), tag=preconnect_tag(h)) for h in plan.hosts],
    }

    html_content = template.render(**context)
    output_path.write_text(html_content, encoding="utf-8")

    return output_path
