"""
Command-line entry point.

    markov-text read PREFIX_LEN OUTPUT INPUT...   build a frequency table file
    markov-text generate TABLE N                 print up to N generated words
    markov-text dump TABLE [--chain]             print a table in canonical form
"""
import logging

import click
from tqdm import tqdm

from . import codec, config
from .errors import TableFormatError
from .expander import expand
from .frequency_table import FrequencyTable
from .generator import generate, make_randrange

logger = logging.getLogger(__name__)


def _load_table(path):
    try:
        return codec.load(path)
    except OSError as e:
        raise click.ClickException(f"Could not open frequency table file {path}: {e.strerror or e}")
    except TableFormatError as e:
        raise click.ClickException(f"Invalid frequency table file {path}: {e}")


def _echo(text, nl=True):
    # Tokens read with surrogateescape hold undecodable input bytes; write them back as bytes.
    click.echo(text.encode(config.FILE_ENCODING, config.FILE_ERRORS), nl=nl)


@click.group()
@click.option('--verbose', '-v', count=True, help="Log progress (-v) or debug details (-vv) to stderr.")
def cli(verbose):
    """Build word-level Markov chain tables and generate text from them."""
    if verbose > 1:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = config.LOG_LEVEL
    logging.basicConfig(level=level, format=config.LOG_FORMAT)
    # basicConfig is a no-op once the root logger has handlers.
    logging.getLogger('markov_text').setLevel(level)


@cli.command()
@click.argument('prefix_len', type=click.IntRange(min=1))
@click.argument('output', type=click.Path(dir_okay=False))
@click.argument('inputs', nargs=-1, required=True, type=click.Path(dir_okay=False, allow_dash=True))
def read(prefix_len, output, inputs):
    """
    Read INPUTS and write their frequency table to OUTPUT.

    Each input file is an independent stream; '-' reads standard input.
    OUTPUT is overwritten if it exists.
    """
    table = FrequencyTable(prefix_len)
    for path in tqdm(inputs, desc="Reading input files", unit="file", disable=None):
        if path == '-':
            stdin = click.get_text_stream('stdin', encoding=config.FILE_ENCODING, errors=config.FILE_ERRORS)
            consumed = table.add_stream(stdin)
        else:
            try:
                consumed = table.add_file(path)
            except OSError as e:
                raise click.ClickException(f"Could not read input file {path}: {e.strerror or e}")
        logger.info(f"{path}: {consumed} tokens")

    try:
        codec.save(table, output)
    except OSError as e:
        raise click.ClickException(f"Could not write frequency table to {output}: {e.strerror or e}")
    except TableFormatError as e:
        raise click.ClickException(str(e))
    logger.info(f"Saved {len(table)} prefixes ({table.total()} tokens) to {output}")


# `build` is accepted as another name for `read`.
cli.add_command(read, name='build')


@cli.command(name='generate')
@click.argument('table_file', type=click.Path(dir_okay=False))
@click.argument('count', type=click.IntRange(min=0))
@click.option('--seed', type=int, default=None, help="Seed for reproducible output (default: $MARKOV_TEXT_SEED).")
def generate_command(table_file, count, seed):
    """Print up to COUNT words generated from TABLE_FILE."""
    table = _load_table(table_file)
    if seed is None:
        seed = config.DEFAULT_SEED
    text = generate(expand(table), count, randrange=make_randrange(seed))
    _echo(text)


@cli.command()
@click.argument('table_file', type=click.Path(dir_okay=False))
@click.option('--chain', 'show_chain', is_flag=True, help="Print the expanded suffix lists instead of counts.")
def dump(table_file, show_chain):
    """Print TABLE_FILE with prefixes in sorted order."""
    table = _load_table(table_file)
    if not show_chain:
        _echo(codec.encode(table), nl=False)
        return
    chain = expand(table)
    for key in sorted(chain):
        _echo(' '.join(filter(None, (key, *chain[key]))))


def main():
    cli(prog_name='markov-text')


if __name__ == '__main__':
    main()
