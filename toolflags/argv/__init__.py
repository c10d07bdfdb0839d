"""
Argument list preparation: response file expansion and tokenizing.
"""

from .expander import RESPONSE_FILE_PREFIX, ArgExpander, expand_args
from .tokenizer import WHITESPACE, build_argv

__all__ = [
    "RESPONSE_FILE_PREFIX",
    "WHITESPACE",
    "ArgExpander",
    "build_argv",
    "expand_args",
]
