"""
satlab: CNF SAT instances with packed literals, DIMACS I/O and random generation.
"""

from satlab.boolvec import BoolVec
from satlab.clause import Clause
from satlab.exceptions import (
    ConfigurationError,
    DegenerateInstanceError,
    DimacsFormatError,
    GenerationError,
    InvalidLiteralError,
    LiteralEncodingError,
    SatLabError,
    VariableIndexError,
)
from satlab.instance import Instance
from satlab.literal import MAX_MAGNITUDE, Literal

__version__ = "0.1.0"

__all__ = [
    "BoolVec",
    "Clause",
    "Instance",
    "Literal",
    "MAX_MAGNITUDE",
    "SatLabError",
    "LiteralEncodingError",
    "InvalidLiteralError",
    "VariableIndexError",
    "DimacsFormatError",
    "GenerationError",
    "DegenerateInstanceError",
    "ConfigurationError",
]
