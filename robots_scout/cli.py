# === FILE: robots_scout/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для проверки URL по robots.txt через командную строку.

Команды:
  check     Проверить URL по файлу robots.txt для заданного User-Agent
  run       Проверить URL из конфига и вывести/сохранить отчёты
  config    Показать текущую конфигурацию
  sitemaps  Вывести Sitemap-URL из robots.txt

Общие опции:
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stderr, если не указан)
  --log-format FORMAT Формат логирования

Дополнительно:
  --version, -v       Показать версию RobotsScout

Пример:
  robots-scout check robots.txt https://example.com/admin/ --agent FooBot --pretty
"""
import json
import sys
from pathlib import Path

import click

from robots_scout import __version__
from robots_scout.config import load_config
from robots_scout.engine import Engine, check_urls, read_robots, resolve_agent
from robots_scout.logger import init_logging
from robots_scout.report.html_report import render_html
from robots_scout.report.json_report import render_json
from robots_scout.robots import Robots
from robots_scout.utils import is_valid_target_agent

CONTEXT_SETTINGS = dict(help_option_names=["--help"])

EXIT_DISALLOWED = 2


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def print_warning(message: str):
    click.secho(message, fg='yellow', err=True)


def _emit(report, json_output, html_output, template_dir, pretty):
    """Печатает отчёт в stdout или сохраняет в файлы."""
    if not json_output and not html_output:
        indent = 2 if pretty else None
        payload = [
            {
                'url': e.url,
                'path': e.path,
                'allowed': e.allowed,
                'line_number': e.line_number,
                'line_text': e.line_text,
            }
            for e in report.entries
        ]
        click.echo(json.dumps(payload, ensure_ascii=False, indent=indent))
        return

    if json_output:
        try:
            saved_json = render_json(report, json_output, pretty=pretty)
            click.echo(f'JSON report: {saved_json}')
        except Exception as e:
            print_error(f'Ошибка при сохранении JSON: {e}')

    if html_output:
        try:
            saved_html = render_html(report, template_dir, html_output)
            click.echo(f'HTML report: {saved_html}')
        except Exception as e:
            print_error(f'Ошибка при сохранении HTML: {e}')


def _report_options(func):
    func = click.option(
        '--pretty', is_flag=True,
        help='Преформатировать JSON-вывод (отступ 2)'
    )(func)
    func = click.option(
        '--template', '-t', 'template_dir',
        default=None,
        type=click.Path(exists=True, file_okay=False, path_type=Path),
        help='Папка с Jinja2-шаблонами (по умолчанию встроенный шаблон)'
    )(func)
    func = click.option(
        '--html', '-h', 'html_output',
        default=None,
        type=click.Path(writable=True, dir_okay=False, path_type=Path),
        help='Сохранить HTML-отчёт в файл'
    )(func)
    func = click.option(
        '--json', '-j', 'json_output',
        default=None,
        type=click.Path(writable=True, dir_okay=False, path_type=Path),
        help='Сохранить JSON-отчёт в файл'
    )(func)
    return func


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='RobotsScout, version %(version)s')
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
def cli(ctx, log_level, log_file, log_format):
    """Группа команд RobotsScout CLI."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    ctx.ensure_object(dict)


@cli.command('check', context_settings=CONTEXT_SETTINGS)
@click.argument('robots_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument('urls', nargs=-1, required=True)
@click.option(
    '--agent', '-a', 'user_agent',
    default='RobotsScout', show_default=True,
    help='User-Agent краулера (продуктовый токен)'
)
@click.option(
    '--no-reduce', 'no_reduce', is_flag=True,
    help='Не сокращать User-Agent до продуктового токена'
)
@click.option(
    '--fail-on-disallow', is_flag=True,
    help='Код выхода 2, если хотя бы один URL запрещён'
)
@_report_options
def check(robots_file, urls, user_agent, no_reduce, fail_on_disallow,
          json_output, html_output, template_dir, pretty):
    """Проверить URLS по ROBOTS_FILE."""
    if not is_valid_target_agent(user_agent):
        print_warning(f'User-Agent {user_agent!r} содержит символы вне [a-zA-Z_-]')
    agent = resolve_agent(user_agent, reduce=not no_reduce)
    try:
        body = read_robots(robots_file)
    except OSError as e:
        print_error(f'Ошибка чтения robots.txt: {e}')

    report = check_urls(body, agent, urls, source=str(robots_file))
    _emit(report, json_output, html_output, template_dir, pretty)
    if fail_on_disallow and report.disallowed_count:
        sys.exit(EXIT_DISALLOWED)


@cli.command('run', context_settings=CONTEXT_SETTINGS)
@click.option(
    '--config', '-c', 'config_path',
    default='configs/default.yaml',
    show_default=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@_report_options
def run(config_path, json_output, html_output, template_dir, pretty):
    """Проверить URL из конфигурации и сгенерировать отчёты."""
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    if not is_valid_target_agent(cfg.user_agent):
        print_warning(f'User-Agent {cfg.user_agent!r} содержит символы вне [a-zA-Z_-]')
    if not cfg.urls:
        print_warning('В конфигурации нет URL для проверки')

    try:
        report = Engine(cfg).run()
    except OSError as e:
        print_error(f'Ошибка чтения robots.txt: {e}')

    _emit(report, json_output, html_output, template_dir, pretty)
    if cfg.fail_on_disallow and report.disallowed_count:
        sys.exit(EXIT_DISALLOWED)


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.option(
    '--config', '-c', 'config_path',
    default='configs/default.yaml',
    show_default=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
def show_config(config_path):
    """Показать текущую конфигурацию в JSON."""
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    click.echo(cfg.model_dump_json(indent=2))


@cli.command('sitemaps', context_settings=CONTEXT_SETTINGS)
@click.argument('robots_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
def sitemaps(robots_file):
    """Вывести Sitemap-URL из ROBOTS_FILE, по одному на строку."""
    try:
        body = read_robots(robots_file)
    except OSError as e:
        print_error(f'Ошибка чтения robots.txt: {e}')
    for url in Robots(body, '').sitemaps:
        click.echo(url)


if __name__ == "__main__":
    cli()
