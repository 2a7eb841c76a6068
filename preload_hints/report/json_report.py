# preload_hints/report/json_report.py

"""
Генерация JSON-отчёта для preload_hints.

Сериализация объекта HintPlan в файл.
"""
import json
from pathlib import Path

from preload_hints.engine import HintPlan


def render_json(plan: HintPlan, output_path: Path | str, *, pretty: bool = True) -> Path:
    """
    Сохраняет план подсказок plan в формате JSON по указанному пути.

    :param plan: объект HintPlan с результатами обработки страницы
    :param output_path: путь к JSON-файлу
    :param pretty: отступ 2 для читаемости
    :return: Path сохранённого файла

    Пример:
    ```python
    from preload_hints.report.json_report import render_json
    report_path = render_json(plan, 'reports/plan.json')
    print(f"JSON report saved to: {report_path}")
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(plan.to_dict(), f, ensure_ascii=False, indent=2 if pretty else None)

    return output
