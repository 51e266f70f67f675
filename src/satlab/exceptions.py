"""
Custom exceptions for satlab.

This module defines exception classes raised while encoding literals,
parsing DIMACS files and evaluating assignments, allowing for more detailed
error handling and reporting.
"""

from typing import Optional


class SatLabError(Exception):
    """Base class for all satlab specific exceptions."""

    def __init__(self, message: Optional[str] = None):
        """
        Initialize the exception.

        Args:
            message: Optional error message
        """
        self.message = message
        super().__init__(message)


class LiteralEncodingError(SatLabError, OverflowError):
    """
    Exception raised when a variable index does not fit the signed literal encoding.

    This signals a programmer error and is not meant to be recovered from.
    """

    def __init__(self, message: str = "Variable index does not fit the literal encoding",
                 index: Optional[int] = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            index: The offending zero-based variable index
        """
        self.index = index

        if index is not None:
            message = f"{message}: index={index}"

        super().__init__(message)


class InvalidLiteralError(SatLabError, ValueError):
    """Exception raised when a raw literal value is zero."""

    def __init__(self, message: str = "Literal value must be nonzero"):
        super().__init__(message)


class VariableIndexError(SatLabError, IndexError):
    """
    Exception raised when a variable index lies outside an assignment.

    This occurs when evaluating a literal that references a variable the
    assignment does not hold, or when writing past the end of a BoolVec.
    """

    def __init__(self, message: str = "Variable index out of range",
                 index: Optional[int] = None, size: Optional[int] = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            index: The zero-based variable index that was requested
            size: Length of the assignment that was indexed
        """
        self.index = index
        self.size = size

        details = []
        if index is not None:
            details.append(f"index={index}")
        if size is not None:
            details.append(f"size={size}")
        if details:
            message = f"{message} ({', '.join(details)})"

        super().__init__(message)


class DimacsFormatError(SatLabError, ValueError):
    """
    Exception raised when DIMACS CNF input is malformed.

    No partial instance is ever produced when this is raised.
    """

    def __init__(self, message: str = "Malformed DIMACS CNF input",
                 line_number: Optional[int] = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            line_number: One-based line number in the trimmed input, if known
        """
        self.line_number = line_number

        if line_number is not None:
            message = f"{message} (line {line_number})"

        super().__init__(message)


class GenerationError(SatLabError, ValueError):
    """Exception raised when random instance parameters cannot be satisfied."""

    def __init__(self, message: str = "Invalid random generation parameters"):
        super().__init__(message)


class DegenerateInstanceError(SatLabError, ZeroDivisionError):
    """Exception raised when a per-variable statistic is requested for an instance without variables."""

    def __init__(self, message: str = "Instance has no variables"):
        super().__init__(message)


class ConfigurationError(SatLabError):
    """Exception raised when a configuration file is missing or invalid."""

    def __init__(self, message: str = "Invalid configuration", path: Optional[str] = None):
        self.path = path

        if path is not None:
            message = f"{message}: {path}"

        super().__init__(message)
