"""
Command-line interface for the line breaking library.

Prints the token, break class and break action for a text given as arguments,
read from a file or piped on stdin.
"""

import json
import time
import unicodedata
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple

import click
import yaml

from unibreak import __version__
from unibreak.core.base import BreakClass, BreakResult
from unibreak.core.classifier import class_ranges, classify_char
from unibreak.core.config import OUTPUT_FORMATS, ConfigError, StreamConfig, load_config
from unibreak.core.streaming import StreamDecodeError, iter_breaks, stream_file
from unibreak.logging_config import (
    LogLevel,
    configure_logging,
    get_logger,
    performance_log,
    user_error,
    user_info,
)

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.option('--quiet', '-q', is_flag=True, help='Suppress log output')
@click.option('--debug', is_flag=True, help='Enable debug mode with detailed logging')
@click.option('--log-level', type=click.Choice([level.value for level in LogLevel]),
              help='Set specific log level')
@click.option('--log-file', type=click.Path(path_type=Path), help='Write logs to file')
@click.pass_context
def main(ctx: click.Context, verbose: bool, quiet: bool, debug: bool,
         log_level: Optional[str], log_file: Optional[Path]) -> None:
    """
    Unicode line breaking CLI

    Shows where a text may, may not, or must break across lines.
    """
    ctx.ensure_object(dict)

    if debug:
        level = LogLevel.DEBUG
    elif log_level:
        level = LogLevel(log_level)
    elif quiet:
        level = LogLevel.MINIMAL
    elif verbose:
        level = LogLevel.VERBOSE
    else:
        level = LogLevel.NORMAL

    configure_logging(
        level=level,
        file_output=bool(log_file),
        log_file=log_file,
        console_output=not quiet,
        collect_performance=debug or verbose,
    )

    ctx.obj['level_from_flags'] = bool(debug or log_level or quiet or verbose)


def _stdin_chunks(block_size: int) -> Iterator[bytes]:
    stream = click.get_binary_stream('stdin')
    while True:
        block = stream.read(block_size)
        if not block:
            break
        yield block


def _format_text(results: Iterable[BreakResult], show_classes: bool) -> Iterator[str]:
    for result in results:
        if show_classes:
            yield (f'token: {json.dumps(result.text, ensure_ascii=False)}, '
                   f'class: {result.break_class.name}, action: {result.action.name}')
        else:
            yield f'{json.dumps(result.text, ensure_ascii=False)} {result.action.name}'


@main.command()
@click.argument('words', nargs=-1)
@click.option('--file', '-f', 'input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='Read text from a file')
@click.option('--config', '-c', 'config_path', type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='Configuration file (YAML or JSON)')
@click.option('--format', 'output_format', type=click.Choice(OUTPUT_FORMATS), help='Output format')
@click.option('--block-size', type=int, help='Bytes read per block from files and stdin')
@click.option('--no-classes', is_flag=True, help='Omit break classes from text output')
@click.pass_context
def breaks(ctx: click.Context, words: Tuple[str, ...], input_file: Optional[Path],
           config_path: Optional[Path], output_format: Optional[str], block_size: Optional[int],
           no_classes: bool) -> None:
    """
    Show tokens and break actions.

    WORDS are joined with single spaces; without WORDS or --file the text is read from stdin.
    """
    try:
        config = load_config(config_path) if config_path else StreamConfig()
        overrides = config.to_dict()
        if output_format:
            overrides['output_format'] = output_format
        if block_size is not None:
            overrides['block_size'] = block_size
        if no_classes:
            overrides['show_classes'] = False
        config = StreamConfig.from_dict(overrides)
    except ConfigError as e:
        user_error(f"Invalid configuration: {e}")
        raise click.ClickException(str(e))

    # Command-line logging flags win over the config file
    if config_path and not ctx.obj.get('level_from_flags'):
        configure_logging(level=config.log_level)

    if words and input_file:
        raise click.UsageError("Give either WORDS or --file, not both")

    start_time = time.time()
    if words:
        results = iter_breaks([' '.join(words)])
    elif input_file:
        results = stream_file(input_file, block_size=config.block_size, encoding=config.encoding)
    else:
        results = iter_breaks(_stdin_chunks(config.block_size), encoding=config.encoding)

    try:
        if config.output_format == 'text':
            count = 0
            for line in _format_text(results, config.show_classes):
                click.echo(line)
                count += 1
        else:
            collected: List[dict] = [result.to_dict() for result in results]
            count = len(collected)
            if config.output_format == 'json':
                click.echo(json.dumps(collected, indent=2, ensure_ascii=False))
            else:
                click.echo(yaml.safe_dump(collected, allow_unicode=True, sort_keys=False), nl=False)
    except StreamDecodeError as e:
        user_error(str(e))
        raise click.ClickException(str(e))

    duration = time.time() - start_time
    performance_log('breaks', duration, tokens=count)
    logger.debug(f"Reported {count} tokens in {duration:.3f}s")


@main.command()
@click.argument('text')
def classify(text: str) -> None:
    """Show the break class of every character of TEXT."""
    for char in text:
        name = unicodedata.name(char, '<unnamed>')
        click.echo(f'U+{ord(char):04X}  {classify_char(char).name:<2}  {name}')


@main.command()
@click.option('--ranges', is_flag=True, help='Also count the code point ranges per class')
def classes(ranges: bool) -> None:
    """List the break classes."""
    for cls in BreakClass:
        line = f'{cls.value:>2}  {cls.name}'
        if ranges:
            intervals = class_ranges(cls)
            covered = sum(end - start + 1 for start, end in intervals)
            line += f'  {len(intervals)} ranges, {covered} code points'
        click.echo(line)
    user_info(f"{len(BreakClass)} break classes")


if __name__ == '__main__':
    main()
