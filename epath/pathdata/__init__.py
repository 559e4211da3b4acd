"""SVG path data adapter: text in, :class:`~epath.path.Path` out, and back."""

from .lexer import tokenize
from .parser import parse_path_data, parse_segments
from .printer import format_number, format_segment, format_subpath, print_path_data

__all__ = [
    "format_number",
    "format_segment",
    "format_subpath",
    "parse_path_data",
    "parse_segments",
    "print_path_data",
    "tokenize",
]
