"""Build word-level Markov chain frequency tables and generate text from them."""

from markov_text.codec import decode, dump, encode, load, save
from markov_text.errors import ArgumentError, MarkovTextError, TableFormatError
from markov_text.expander import ExpandedChain, expand
from markov_text.frequency_table import FrequencyTable, tokenize
from markov_text.generator import generate, generate_words, make_randrange
from markov_text.markov_chain import MarkovChain
from markov_text.prefix import Prefix

__all__ = [
    "ArgumentError",
    "ExpandedChain",
    "FrequencyTable",
    "MarkovChain",
    "MarkovTextError",
    "Prefix",
    "TableFormatError",
    "decode",
    "dump",
    "encode",
    "expand",
    "generate",
    "generate_words",
    "load",
    "make_randrange",
    "save",
    "tokenize",
]

__version__ = "0.1.0"
