"""
Packed literal encoding.

A literal is a variable reference that may be negated, stored as one nonzero
signed integer: ``abs(value) - 1`` is the zero-based variable index and a
negative value means the literal is negated. This is numerically the same as
the DIMACS representation, so parsing and writing need no remapping.
"""

from typing import Optional

from satlab.boolvec import BoolVec
from satlab.exceptions import InvalidLiteralError, LiteralEncodingError, VariableIndexError

# The encoding is sized as a signed 64-bit integer: encoded magnitudes stay
# strictly below MAX_MAGNITUDE.
MAX_MAGNITUDE = 2**63


class Literal:
    """
    A variable reference that may be negated.

    Equality compares the encoded value. ``negated()`` returns a new literal,
    ``negate()`` flips the sign of this one in place.
    """

    __slots__ = ("_value",)

    def __init__(self, value: int):
        """
        Wrap a nonzero DIMACS-style signed value.

        Raises:
            InvalidLiteralError: If ``value`` is zero
        """
        value = int(value)
        if value == 0:
            raise InvalidLiteralError()
        self._value = value

    @classmethod
    def new(cls, index: int, negated: bool) -> "Literal":
        """
        Create a literal from a zero-based variable index and a negation flag.

        Args:
            index: Zero-based variable index
            negated: Whether the literal is negated

        Raises:
            LiteralEncodingError: If the index is negative or too large to encode
        """
        index = int(index)
        if index < 0 or index >= MAX_MAGNITUDE - 1:
            raise LiteralEncodingError(index=index)

        magnitude = index + 1
        return cls(-magnitude if negated else magnitude)

    @classmethod
    def from_raw_signed(cls, value: int) -> "Literal":
        """
        Wrap an already signed, one-based value verbatim (DIMACS form).

        Raises:
            InvalidLiteralError: If ``value`` is zero
        """
        return cls(value)

    def as_raw_signed(self) -> int:
        """Return the DIMACS-compatible signed integer."""
        return self._value

    def index(self) -> int:
        """Return the zero-based variable index."""
        return abs(self._value) - 1

    def is_negated(self) -> bool:
        return self._value < 0

    def negated(self) -> "Literal":
        return Literal(-self._value)

    def copy(self) -> "Literal":
        return Literal(self._value)

    def negate(self) -> "Literal":
        """Flip the sign in place and return this literal."""
        self._value = -self._value
        return self

    def try_eval(self, assignment: BoolVec) -> Optional[bool]:
        """
        Evaluate the literal against an assignment.

        Returns:
            The assigned value XOR the negation flag, or ``None`` if the
            variable lies outside the assignment.
        """
        value = assignment.get(self.index())
        if value is None:
            return None
        return value != self.is_negated()

    def eval(self, assignment: BoolVec) -> bool:
        """
        Evaluate the literal against an assignment known to cover it.

        Raises:
            VariableIndexError: If the variable lies outside the assignment
        """
        result = self.try_eval(assignment)
        if result is None:
            raise VariableIndexError(index=self.index(), size=len(assignment))
        return result

    def __int__(self) -> int:
        return self._value

    def __neg__(self) -> "Literal":
        return self.negated()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Literal):
            return NotImplemented
        return self._value == other._value

    # Mutable through negate(), so not hashable.
    __hash__ = None

    def __repr__(self) -> str:
        return f"Literal({self._value})"

    def __str__(self) -> str:
        return f"{'¬' if self.is_negated() else ''}x{self.index()}"
