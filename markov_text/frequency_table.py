import logging
import re
from collections import Counter, defaultdict

from . import config
from .errors import ArgumentError
from .prefix import Prefix

logger = logging.getLogger(__name__)


# Unicode white space without the \x1c-\x1f separators that str.split() also
# breaks on, so tokens split the same way as in tables written by older tools.
WHITESPACE_RE = re.compile('[\t\n\v\f\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000]+')


def tokenize(text):
    """Split text on runs of whitespace, dropping empty strings."""
    return [token for token in WHITESPACE_RE.split(text) if token]


class FrequencyTable:
    """
    Counts how often each token follows each prefix.

    Keys are prefix keys (tokens joined by a single space), values map a
    suffix token to the number of times it followed that prefix.
    """

    def __init__(self, prefix_len):
        if prefix_len < 0:
            raise ArgumentError(f"Prefix length must be non-negative, got {prefix_len}")
        self._prefix_len = prefix_len
        self._counts = defaultdict(Counter)

    @classmethod
    def from_counts(cls, prefix_len, counts):
        """Build a table directly from a {prefix_key: {suffix: count}} mapping."""
        table = cls(prefix_len)
        for key, suffixes in counts.items():
            table._counts[key] = Counter(suffixes)
        return table

    @property
    def prefix_len(self):
        return self._prefix_len

    # --- Ingestion ---

    def add_tokens(self, tokens):
        """
        Fold one independent token stream into the table.

        The window starts from the sentinel prefix for every call, so tokens
        from different streams never form a prefix together.
        Returns the number of tokens consumed.
        """
        prefix = Prefix.start(self._prefix_len)
        consumed = 0
        for token in tokens:
            self._counts[prefix.key][token] += 1
            prefix = prefix.shift(token)
            consumed += 1
        logger.debug(f"Consumed {consumed} tokens, table now has {len(self)} prefixes.")
        return consumed

    def add_text(self, text):
        return self.add_tokens(tokenize(text))

    def add_stream(self, stream):
        """Fold a text stream, read line by line, as one independent stream."""
        return self.add_tokens(token for line in stream for token in tokenize(line))

    def add_file(self, path):
        logger.info(f"Reading {path}...")
        with open(path, 'r', encoding=config.FILE_ENCODING, errors=config.FILE_ERRORS) as f:
            return self.add_stream(f)

    # --- Access ---

    def suffixes(self, key):
        """A copy of the suffix counts recorded for `key` (empty if unseen)."""
        return dict(self._counts.get(key, {}))

    def items(self):
        """(key, suffix counts) pairs in ascending key order."""
        for key in sorted(self._counts):
            yield key, dict(self._counts[key])

    def total(self):
        """Sum of every recorded count."""
        return sum(sum(suffixes.values()) for suffixes in self._counts.values())

    def to_dict(self):
        return {key: dict(suffixes) for key, suffixes in self._counts.items()}

    def __len__(self):
        return len(self._counts)

    def __contains__(self, key):
        return key in self._counts

    def __iter__(self):
        return iter(sorted(self._counts))

    def __getitem__(self, key):
        if key not in self._counts:
            raise KeyError(key)
        return dict(self._counts[key])

    def __eq__(self, other):
        if not isinstance(other, FrequencyTable):
            return NotImplemented
        return self._prefix_len == other._prefix_len and self.to_dict() == other.to_dict()

    def __repr__(self):
        return f"FrequencyTable(prefix_len={self._prefix_len}, prefixes={len(self)})"
