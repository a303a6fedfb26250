from . import codec
from .expander import expand
from .frequency_table import FrequencyTable
from .generator import generate_words, make_randrange


class MarkovChain:
    """
    A word-level Markov chain: a frequency table plus the operations that
    build, persist and sample it.
    """

    def __init__(self, prefix_len=2, table=None):
        if table is None:
            table = FrequencyTable(prefix_len)
        elif table.prefix_len != prefix_len:
            raise ValueError(
                f"Table has prefix length {table.prefix_len}, expected {prefix_len}"
            )
        self.prefix_len = prefix_len
        self.table = table

    def train(self, sequences):
        """
        Fold each sequence into the table as an independent stream.

        A sequence is either a string, which is split on whitespace, or an
        already tokenized list of words.
        """
        for seq in sequences:
            if isinstance(seq, str):
                self.table.add_text(seq)
            else:
                self.table.add_tokens(seq)

    def add_file(self, path):
        return self.table.add_file(path)

    def save(self, path):
        codec.save(self.table, path)

    @classmethod
    def load(cls, path):
        table = codec.load(path)
        return cls(table.prefix_len, table=table)

    def chain(self):
        # Rebuilt on every call; the expansion is never cached or persisted.
        return expand(self.table)

    def generate(self, length=100, randrange=None, seed=None):
        """Return up to `length` generated words as a list."""
        if randrange is None:
            randrange = make_randrange(seed)
        return generate_words(self.chain(), length, randrange=randrange)
