"""Section/table parsing engine for session-text EDL exports."""

from ptedl.parser.driver import parse_file, parse_lines

__all__ = ["parse_file", "parse_lines"]
