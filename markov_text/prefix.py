from . import config
from .errors import ArgumentError


class Prefix(tuple):
    """
    The last `prefix_len` tokens seen, oldest first.

    Prefixes are immutable: `shift` returns a new window instead of editing
    this one, so a prefix can be stored or shared freely.
    """

    @classmethod
    def start(cls, prefix_len):
        """The window before any token is read: `prefix_len` sentinel tokens."""
        if prefix_len < 0:
            raise ArgumentError(f"Prefix length must be non-negative, got {prefix_len}")
        return cls((config.SENTINEL_TOKEN,) * prefix_len)

    def shift(self, token):
        """Drop the oldest token and append `token`."""
        if not self:
            return self
        return Prefix(self[1:] + (token,))

    @property
    def key(self):
        # Used as the table key, so equal windows must give equal strings.
        return ' '.join(self)

    def __str__(self):
        return self.key
