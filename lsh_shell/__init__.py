"""lsh - a small line-oriented command interpreter"""

__version__ = '0.1.0'

from .shell import Shell
from .executor import Executor
from .tokenizer import split_line

__all__ = ['Shell', 'Executor', 'split_line', '__version__']
