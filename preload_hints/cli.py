# === FILE: preload_hints/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска preload_hints через командную строку.

Команды:
  process   Вставить preload/preconnect-теги в страницу и вывести HTML
  plan      Показать план подсказок (JSON) и/или сохранить отчёты
  config    Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (по умолчанию значения OptimizeConfig)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stderr, если не указан)
  --log-format FORMAT Формат логирования

SOURCE — путь к HTML-файлу, "-" для stdin или http(s) URL страницы.

Пример:
  preload-hints --config configs/default.yaml process page.html --template page_view -o out.html
"""
import asyncio
import json
import sys
from pathlib import Path
from typing import Optional, Tuple
from urllib.parse import urlsplit

import click

from preload_hints import __version__
from preload_hints.config import OptimizeConfig, load_config
from preload_hints.engine import Engine
from preload_hints.exceptions import PreloadHintsError
from preload_hints.fetcher import fetch_page
from preload_hints.logger import configure as configure_logging
from preload_hints.report.html_report import render_html
from preload_hints.report.json_report import render_json

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def read_source(source: str, cfg: OptimizeConfig) -> Tuple[str, Optional[str]]:
    """Возвращает HTML и Host страницы (только для URL)."""
    if source.startswith(('http://', 'https://')):
        page = asyncio.run(fetch_page(source, cfg))
        return page.content, urlsplit(source).netloc
    if source == '-':
        return sys.stdin.read(), None
    return Path(source).read_text(encoding='utf-8'), None


template_option = click.option(
    '--template', '-t', 'template',
    required=True,
    help='Идентификатор шаблона, которым отрендерена страница'
)
host_option = click.option(
    '--host', 'request_host',
    default=None,
    help='Host запроса (используется, если board_url не задан)'
)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='PreloadHints, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--log-level', 'log_level',
    default='WARNING', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (stderr, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд PreloadHints CLI."""
    configure_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path) if config_path else OptimizeConfig()
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('process', context_settings=CONTEXT_SETTINGS)
@click.argument('source')
@template_option
@host_option
@click.option(
    '--output', '-o', 'output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить результат в файл (stdout, если не указан)'
)
@click.pass_context
def process(ctx, source, template, request_host, output):
    """Вставить подсказки в страницу SOURCE."""
    cfg = ctx.obj['config']
    try:
        html, page_host = read_source(source, cfg)
    except (OSError, PreloadHintsError) as e:
        print_error(f'Ошибка чтения страницы: {e}')
    try:
        result = Engine(cfg).process(html, template, request_host or page_host)
    except PreloadHintsError as e:
        print_error(f'Ошибка обработки: {e}')

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(result, encoding='utf-8')
        click.echo(f'Result: {output}', err=True)
    else:
        click.echo(result, nl=False)


@cli.command('plan', context_settings=CONTEXT_SETTINGS)
@click.argument('source')
@template_option
@host_option
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option(
    '--html', '-h', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить HTML-отчёт в файл'
)
@click.option(
    '--report-template', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Папка с Jinja2-шаблоном report.html.j2'
)
@click.option(
    '--pretty', is_flag=True,
    help='Преформатировать JSON-вывод (отступ 2)'
)
@click.pass_context
def plan(ctx, source, template, request_host, json_output, html_output, template_dir, pretty):
    """Построить план подсказок для страницы SOURCE без изменения HTML."""
    cfg = ctx.obj['config']
    try:
        html, page_host = read_source(source, cfg)
    except (OSError, PreloadHintsError) as e:
        print_error(f'Ошибка чтения страницы: {e}')
    try:
        hint_plan = Engine(cfg).plan(html, template, request_host or page_host)
    except PreloadHintsError as e:
        print_error(f'Ошибка обработки: {e}')

    # Если не сохраняем в файл — печатаем в stdout
    if not json_output and not html_output:
        indent = 2 if pretty else None
        click.echo(json.dumps(hint_plan.to_dict(), ensure_ascii=False, indent=indent))
        return

    if json_output:
        try:
            saved_json = render_json(hint_plan, json_output, pretty=pretty)
            click.echo(f'JSON report: {saved_json}')
        except Exception as e:
            print_error(f'Ошибка при сохранении JSON: {e}')

    if html_output:
        try:
            saved_html = render_html(hint_plan, template_dir, html_output)
            click.echo(f'HTML report: {saved_html}')
        except Exception as e:
            print_error(f'Ошибка при сохранении HTML: {e}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
