"""
Output Module - Black Box Interface

Purpose: Turn resolved variables into printable lines
Interface: format_line(), LineFormatter.render()
Hidden: Prefix/suffix/separator handling

Lines carry no trailing newline; the caller decides how to write them.
"""

from .formatter import LineFormatter, format_line

__all__ = ["LineFormatter", "format_line"]
