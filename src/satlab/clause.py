"""
Clauses: ordered disjunctions of literals.
"""

from typing import Iterable, Iterator

from satlab.boolvec import BoolVec
from satlab.literal import Literal


class Clause:
    """
    An ordered sequence of literals read as their disjunction.

    Literal order is kept exactly as given so that files round-trip; it has no
    effect on satisfaction. Duplicate and complementary literals are allowed.
    """

    __slots__ = ("_literals",)

    def __init__(self, literals: Iterable[Literal] = ()):
        # Literals are copied so in-place negation never reaches the caller's objects
        self._literals = [lit.copy() for lit in literals]

    @classmethod
    def from_indices(cls, indices: Iterable[int], negations: Iterable[bool]) -> "Clause":
        """
        Build a clause from parallel sequences of variable indices and negation flags.

        The sequences are paired up with ``zip``, so the longer one is truncated
        to the length of the shorter.
        """
        return cls(Literal.new(i, n) for i, n in zip(indices, negations))

    @classmethod
    def from_raw_signed(cls, values: Iterable[int]) -> "Clause":
        """Build a clause from DIMACS-style signed integers (without the ``0`` terminator)."""
        return cls(Literal.from_raw_signed(v) for v in values)

    @property
    def literals(self) -> tuple[Literal, ...]:
        """The literals in order, as copies."""
        return tuple(lit.copy() for lit in self._literals)

    def as_raw_signed(self) -> list[int]:
        return [lit.as_raw_signed() for lit in self._literals]

    def negated(self) -> "Clause":
        """
        Return a copy with every literal negated individually.

        This is literal-wise negation: ``(a ∨ b)`` becomes ``(¬a ∨ ¬b)``. It is
        not the logical complement of the clause, which by De Morgan's law
        would be the conjunction ``(¬a ∧ ¬b)``.
        """
        return Clause(lit.negated() for lit in self._literals)

    def negate(self) -> "Clause":
        """Literal-wise negation in place; see ``negated``. Returns this clause."""
        for lit in self._literals:
            lit.negate()
        return self

    def evaluate(self, assignment: BoolVec) -> Iterator[bool]:
        """Lazily yield the value of each literal under ``assignment``, in order."""
        return (lit.eval(assignment) for lit in self._literals)

    def evaluate_negated(self, assignment: BoolVec) -> Iterator[bool]:
        """Lazily yield the value of each negated literal, leaving the clause unchanged."""
        return (lit.negated().eval(assignment) for lit in self._literals)

    def is_satisfied(self, assignment: BoolVec) -> bool:
        return any(self.evaluate(assignment))

    def __len__(self) -> int:
        return len(self._literals)

    def __iter__(self) -> Iterator[Literal]:
        return iter(self.literals)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Clause):
            return NotImplemented
        return self._literals == other._literals

    __hash__ = None

    def __repr__(self) -> str:
        return f"Clause.from_raw_signed({self.as_raw_signed()!r})"

    def __str__(self) -> str:
        return "(" + " ∨ ".join(str(lit) for lit in self._literals) + ")"
