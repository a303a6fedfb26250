import random

from .errors import ArgumentError
from .prefix import Prefix


def make_randrange(seed=None):
    """
    Return a `randrange(n)` callable backed by its own random.Random.

    Passing the same seed gives the same sequence of picks.
    """
    return random.Random(seed).randrange


def generate_words(chain, n, randrange=None):
    """
    Walk the chain from the sentinel prefix and return at most `n` tokens.

    The walk stops early when the current prefix has no recorded suffix.
    `randrange(size)` must return an index in [0, size).
    """
    if n < 0:
        raise ArgumentError(f"Number of words must be non-negative, got {n}")
    if randrange is None:
        randrange = make_randrange()

    prefix = Prefix.start(chain.prefix_len)
    words = []
    while len(words) < n:
        choices = chain.get(prefix.key)
        if not choices:
            break
        index = randrange(len(choices))
        if not 0 <= index < len(choices):
            raise ValueError(f"randrange returned {index}, expected a value in [0, {len(choices)})")
        word = choices[index]
        words.append(word)
        prefix = prefix.shift(word)
    return words


def generate(chain, n, randrange=None):
    """Same as generate_words, joined into a single space-separated string."""
    return ' '.join(generate_words(chain, n, randrange=randrange))
