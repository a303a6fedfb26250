from collections.abc import Mapping


class ExpandedChain(Mapping):
    """
    Read-only map from prefix key to a tuple of suffix tokens.

    Every suffix appears as many times as it was counted, so a uniform pick
    from the tuple follows the recorded frequencies.
    """

    def __init__(self, prefix_len, suffixes):
        self.prefix_len = prefix_len
        self._suffixes = dict(suffixes)

    def __getitem__(self, key):
        return self._suffixes[key]

    def __iter__(self):
        return iter(self._suffixes)

    def __len__(self):
        return len(self._suffixes)

    def __repr__(self):
        return f"ExpandedChain(prefix_len={self.prefix_len}, prefixes={len(self)})"


def expand_suffixes(suffixes):
    # Sorted so that the same counts always expand to the same sequence.
    return tuple(suffix for suffix in sorted(suffixes) for _ in range(suffixes[suffix]))


def expand(table):
    """Expand a FrequencyTable into an ExpandedChain. The table is left untouched."""
    return ExpandedChain(
        table.prefix_len,
        {key: expand_suffixes(suffixes) for key, suffixes in table.items()},
    )
