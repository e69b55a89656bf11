"""Helpers for reading and tokenizing kernel pseudo-files"""
import re
from pathlib import Path
from typing import List, Union


_WHITESPACE = re.compile(r"\s+")


def read_file(path: Union[str, Path]) -> str:
    """Read a file's full contents, returning an empty string on any error.

    Kernel features such as /proc/net/netstat are missing on some kernels,
    so a missing or unreadable source must degrade to "no samples" rather
    than abort the scrape.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError):
        return ""


def split_whitespace(text: str) -> List[str]:
    """Split text on runs of whitespace, dropping empty tokens"""
    return [token for token in _WHITESPACE.split(text) if token]


def split_lines(text: str) -> List[str]:
    """Split text into its non-empty lines"""
    return [line for line in text.split("\n") if line]


def is_number(value: str) -> bool:
    """Check if a string is a valid number"""
    if not value:
        return False
    try:
        float(value)
        return True
    except ValueError:
        return False
