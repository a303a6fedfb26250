"""Exception types raised by the markov_text components."""


class MarkovTextError(Exception):
    """Base class for every error raised by markov_text."""


class ArgumentError(MarkovTextError, ValueError):
    """A length or count argument is out of range."""


class TableFormatError(MarkovTextError, ValueError):
    """Frequency table text that does not follow the table file format."""

    def __init__(self, message, line_number=None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number
