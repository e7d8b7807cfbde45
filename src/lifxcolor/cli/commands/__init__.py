"""CLI commands."""

from .compare import compare
from .config import config
from .convert import convert
from .named import named
