"""
Reading and writing frequency tables.

A table file is plain text. The first line holds the prefix length; every
following line holds one prefix followed by its (suffix, count) pairs, all
separated by single spaces:

    2
    "" "" I 1
    "" I am 1
    I am a 1 not 1

Prefix lines are written in ascending key order and suffix pairs in ascending
suffix order, so encoding the same table always produces the same bytes.
"""
import io
import logging
import re

from . import config
from .errors import TableFormatError
from .frequency_table import WHITESPACE_RE, FrequencyTable, tokenize

logger = logging.getLogger(__name__)

_COUNT_RE = re.compile(r'[0-9]+')


def _check_token(token, prefix_key):
    if not token or WHITESPACE_RE.search(token):
        raise TableFormatError(
            f"Cannot encode token {token!r} under prefix {prefix_key!r}: "
            "tokens must be non-empty and contain no whitespace"
        )


def encode_lines(table):
    """Yield the lines of the encoded table, without line terminators."""
    yield str(table.prefix_len)
    for key, suffixes in table.items():
        fields = key.split(' ') if key else []
        if len(fields) != table.prefix_len:
            raise TableFormatError(
                f"Cannot encode prefix {key!r}: expected {table.prefix_len} space-free tokens"
            )
        for token in fields:
            _check_token(token, key)
        for suffix in sorted(suffixes):
            _check_token(suffix, key)
            fields.extend((suffix, str(suffixes[suffix])))
        yield ' '.join(fields)


def encode(table):
    return ''.join(line + '\n' for line in encode_lines(table))


def dump(table, fp):
    # Encode fully first so a bad token does not leave a half-written file.
    fp.write(encode(table))


def save(table, path):
    text = encode(table)
    with open(path, 'w', encoding=config.FILE_ENCODING, errors=config.FILE_ERRORS) as f:
        f.write(text)
    logger.info(f"Wrote {len(table)} prefixes to {path}")


def _parse_header(line):
    value = line.strip()
    if not _COUNT_RE.fullmatch(value):
        raise TableFormatError(
            f"Expected a non-negative prefix length, got {value!r}", line_number=1
        )
    return int(value)


def _parse_line(fields, prefix_len, line_number):
    if len(fields) < prefix_len:
        raise TableFormatError(
            f"Expected at least {prefix_len} prefix fields, got {len(fields)}",
            line_number=line_number,
        )
    key = ' '.join(fields[:prefix_len])
    rest = fields[prefix_len:]
    if not rest:
        raise TableFormatError(f"Prefix {key!r} has no suffixes", line_number=line_number)
    if len(rest) % 2:
        raise TableFormatError(
            f"Odd number of suffix fields ({len(rest)}) after prefix {key!r}",
            line_number=line_number,
        )

    suffixes = {}
    for suffix, count in zip(rest[::2], rest[1::2]):
        if not _COUNT_RE.fullmatch(count):
            raise TableFormatError(
                f"Count for suffix {suffix!r} is not a non-negative integer: {count!r}",
                line_number=line_number,
            )
        if suffix in suffixes:
            raise TableFormatError(
                f"Suffix {suffix!r} repeated for prefix {key!r}", line_number=line_number
            )
        suffixes[suffix] = int(count)
    return key, suffixes


def decode_lines(lines):
    """
    Build a FrequencyTable from an iterable of table lines.

    Raises TableFormatError on the first malformed line; nothing is returned
    for a table that fails to decode.
    """
    lines = iter(lines)
    header = next(lines, None)
    if header is None:
        raise TableFormatError("Table is empty; expected a prefix length on line 1")
    prefix_len = _parse_header(header)

    counts = {}
    for line_number, line in enumerate(lines, start=2):
        fields = tokenize(line)
        if not fields:
            continue
        key, suffixes = _parse_line(fields, prefix_len, line_number)
        if key in counts:
            raise TableFormatError(f"Prefix {key!r} appears more than once", line_number=line_number)
        counts[key] = suffixes

    logger.debug(f"Decoded {len(counts)} prefixes (prefix length {prefix_len}).")
    return FrequencyTable.from_counts(prefix_len, counts)


def decode(text):
    # splitlines() would also break on \x1c-\x1e, which may appear inside tokens.
    return decode_lines(io.StringIO(text))


def load_stream(fp):
    return decode_lines(fp)


def load(path):
    logger.info(f"Loading frequency table from {path}...")
    with open(path, 'r', encoding=config.FILE_ENCODING, errors=config.FILE_ERRORS) as f:
        return load_stream(f)
