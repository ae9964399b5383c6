# === FILE: robots_scout/cli.py ===
#!/usr/bin/env python3
"""
Точка входа RobotsScout для командной строки.

Команды:
  check     Проверить, можно ли агенту обходить указанные пути
  sitemaps  Вывести sitemap-URL из robots.txt
  locate    Показать адрес robots.txt для URL
  config    Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (по умолчанию встроенные значения)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stderr, если не указан)

Дополнительно:
  --version, -v       Показать версию RobotsScout

Пример:
  robots-scout check https://example.com/ /private /public --agent Googlebot
"""
import sys
import asyncio
import json
from pathlib import Path

import click

from robots_scout import __version__
from robots_scout.config import RobotsConfig, load_config
from robots_scout.fetcher import fetch_robots
from robots_scout.locate import LocateError, locate, same_scope
from robots_scout.logger import init_logging, logger
from robots_scout.parser.rules import from_reader
from robots_scout.robots import Robots

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    logger.error(message)
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def load_robots(source: str, config: RobotsConfig) -> Robots:
    """Загружает robots.txt из файла или по http(s)-URL."""
    if source.lower().startswith(("http://", "https://")):
        return asyncio.run(fetch_robots(source, config))
    with open(source, 'rb') as fh:
        return from_reader(fh)


def _load_or_fail(source: str, config: RobotsConfig) -> Robots:
    try:
        return load_robots(source, config)
    except (OSError, LocateError) as e:
        print_error(f'Не удалось получить robots.txt: {e}')


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='RobotsScout, version %(version)s')
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
@click.pass_context
def cli(ctx, config_path, log_level, log_file):
    """Группа команд RobotsScout CLI."""
    init_logging(level=log_level, log_file=str(log_file) if log_file else None)
    try:
        cfg = load_config(config_path) if config_path else RobotsConfig()
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('check', context_settings=CONTEXT_SETTINGS)
@click.argument('source')
@click.argument('paths', nargs=-1, required=True)
@click.option(
    '--agent', '-a', 'agent',
    default=None,
    help='User-Agent для проверки (по умолчанию из конфига)'
)
@click.option('--json', 'as_json', is_flag=True, help='Вывести результат в JSON')
@click.option('--strict', is_flag=True, help='Код выхода 1, если хоть один путь запрещён')
@click.pass_context
def check(ctx, source, paths, agent, as_json, strict):
    """Проверить PATHS по robots.txt из SOURCE (файл или URL)."""
    cfg = ctx.obj['config']
    agent = agent or cfg.user_agent
    robots = _load_or_fail(source, cfg)

    allowed = robots.tester(agent)
    results = {path: allowed(path) for path in paths}

    if as_json:
        click.echo(json.dumps({'agent': agent, 'results': results}, ensure_ascii=False, indent=2))
    else:
        for path, ok in results.items():
            click.echo(f"{'allowed' if ok else 'disallowed'}\t{path}")

    if strict and not all(results.values()):
        sys.exit(1)


@cli.command('sitemaps', context_settings=CONTEXT_SETTINGS)
@click.argument('source')
@click.option(
    '--in-scope', 'scope_url',
    default=None,
    help='Оставить только sitemap из области этого robots.txt'
)
@click.pass_context
def sitemaps(ctx, source, scope_url):
    """Вывести sitemap-URL из robots.txt SOURCE."""
    robots = _load_or_fail(source, ctx.obj['config'])
    for url in robots.sitemaps:
        if scope_url and not same_scope(scope_url, url):
            logger.debug('Sitemap %s is out of scope, skipped', url)
            continue
        click.echo(url)


@cli.command('locate', context_settings=CONTEXT_SETTINGS)
@click.argument('url')
def locate_cmd(url):
    """Показать URL robots.txt, который управляет URL."""
    try:
        click.echo(locate(url))
    except LocateError as e:
        print_error(f'Некорректный URL: {e}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
