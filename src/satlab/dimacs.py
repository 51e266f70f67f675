"""
DIMACS CNF reading and writing.

This module converts between DIMACS CNF text and plain Python data (a variable
count plus clauses as lists of signed integers). Building literal and clause
objects is left to ``satlab.instance``.

Reading rules:

- the whole text is trimmed, then the leading run of lines starting with
  ``c`` is skipped; comments after the header are not recognised;
- the next line must be ``p cnf <num_variables> <num_clauses>``;
- exactly ``num_clauses`` further lines are read as clauses, each made of the
  signed integers before its first ``0``;
- anything after those lines is ignored.
"""

import logging
import os
import re
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence, TextIO, Union

from satlab.exceptions import DimacsFormatError

logger = logging.getLogger(__name__)

_UNSIGNED_RE = re.compile(r"\+?[0-9]+")
_SIGNED_RE = re.compile(r"[+-]?[0-9]+")


@dataclass
class DimacsFormula:
    """Parsed contents of a DIMACS CNF file."""

    num_variables: int
    clauses: list[list[int]] = field(default_factory=list)
    comments: list[str] = field(default_factory=list)

    @property
    def num_clauses(self) -> int:
        return len(self.clauses)


def _parse_count(token: Optional[str], name: str, line_number: int) -> int:
    if token is None:
        raise DimacsFormatError(f"Missing {name} in problem line", line_number)
    if not _UNSIGNED_RE.fullmatch(token):
        raise DimacsFormatError(f"Invalid {name} {token!r} in problem line", line_number)
    return int(token)


def _parse_clause(line: str, line_number: int) -> list[int]:
    clause = []
    for token in line.split():
        if not _SIGNED_RE.fullmatch(token):
            raise DimacsFormatError(f"Invalid literal {token!r}", line_number)
        value = int(token)
        if value == 0:
            break
        clause.append(value)
    return clause


def parse_dimacs(source: Union[str, TextIO]) -> DimacsFormula:
    """
    Parse a CNF formula from DIMACS text.

    Args:
        source: DIMACS content as a string or file-like object

    Returns:
        The parsed formula

    Raises:
        DimacsFormatError: If the header is missing or malformed, a clause
            contains a token that is not an integer, or fewer clause lines
            are present than the header declares
    """
    if not isinstance(source, str):
        source = source.read()

    lines = source.strip().splitlines()
    position = 0

    comments = []
    while position < len(lines) and lines[position].startswith("c"):
        comments.append(lines[position][1:].strip())
        position += 1

    if position >= len(lines):
        raise DimacsFormatError("No problem line found")

    header_number = position + 1
    header = lines[position].split()
    position += 1

    if not header or header[0] != "p":
        raise DimacsFormatError(f"Expected problem line, got {lines[header_number - 1]!r}", header_number)
    if len(header) < 2 or header[1] != "cnf":
        problem_type = header[1] if len(header) > 1 else None
        raise DimacsFormatError(f"Unsupported problem type {problem_type!r}", header_number)

    num_variables = _parse_count(header[2] if len(header) > 2 else None, "variable count", header_number)
    num_clauses = _parse_count(header[3] if len(header) > 3 else None, "clause count", header_number)

    available = len(lines) - position
    if available < num_clauses:
        raise DimacsFormatError(
            f"Expected {num_clauses} clauses, but found {available} lines",
            len(lines),
        )

    clauses = []
    for offset in range(num_clauses):
        clauses.append(_parse_clause(lines[position + offset], position + offset + 1))

    trailing = available - num_clauses
    if trailing:
        logger.debug(f"Ignoring {trailing} line(s) after the last declared clause")

    return DimacsFormula(num_variables=num_variables, clauses=clauses, comments=comments)


def load_cnf_file(file_path: Union[str, os.PathLike]) -> DimacsFormula:
    """
    Load a CNF formula from a DIMACS file.

    Raises:
        OSError: If the file cannot be read
        DimacsFormatError: If the file format is invalid
    """
    try:
        with open(file_path, encoding="utf-8") as f:
            return parse_dimacs(f)
    except UnicodeDecodeError as e:
        raise DimacsFormatError("File is not valid UTF-8 text") from e


def formula_to_dimacs(
    num_variables: int,
    clauses: Iterable[Sequence[int]],
    comments: Optional[Iterable[str]] = None,
) -> str:
    """
    Convert a formula to DIMACS text.

    Every clause line lists its literals each followed by a space and ends
    with ``0``; the text ends with a newline.

    Args:
        num_variables: Number of variables to declare
        clauses: Clauses as sequences of signed integers
        comments: Comment lines to put before the problem line
    """
    clauses = list(clauses)

    lines = []
    for comment in comments or []:
        # One "c" line per embedded line, so the header stays the first non-comment line
        for piece in str(comment).splitlines() or [""]:
            lines.append(f"c {piece}")
    lines.append(f"p cnf {num_variables} {len(clauses)}")
    for clause in clauses:
        lines.append("".join(f"{lit} " for lit in clause) + "0")

    return "\n".join(lines) + "\n"


def save_cnf_file(
    file_path: Union[str, os.PathLike],
    num_variables: int,
    clauses: Iterable[Sequence[int]],
    comments: Optional[Iterable[str]] = None,
) -> None:
    """Write a formula to a DIMACS file, replacing any existing content."""
    dimacs_str = formula_to_dimacs(num_variables, clauses, comments)

    with open(file_path, "w", encoding="utf-8") as f:
        f.write(dimacs_str)
