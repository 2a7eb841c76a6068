"""preload_hints.report: отчёты о плане подсказок (JSON и HTML) для CLI и тестов."""

from preload_hints.report.html_report import render_html
from preload_hints.report.json_report import render_json

__all__ = ["render_json", "render_html"]
