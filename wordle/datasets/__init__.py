from .validator import validate_wordlist, pretty_summary
from .io import read_lines, write_lines, unique_preserve_order, DEFAULT_WORDLIST
from .lexicon import Lexicon

__all__ = ["Lexicon", "validate_wordlist", "pretty_summary", "read_lines", "write_lines",
           "unique_preserve_order", "DEFAULT_WORDLIST"]
