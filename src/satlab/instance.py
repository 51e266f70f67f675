"""
SAT instances in conjunctive normal form.

An ``Instance`` pairs a list of clauses with a concrete assignment of truth
values, one per variable. It can be read from and written to DIMACS CNF,
generated at random, and queried for how many clauses the current assignment
satisfies. It never searches for a satisfying assignment.
"""

import logging
import os
from typing import Iterable, Optional, Union

from satlab.boolvec import BoolVec
from satlab.clause import Clause
from satlab.dimacs import DimacsFormula, formula_to_dimacs, load_cnf_file, parse_dimacs, save_cnf_file
from satlab.exceptions import DegenerateInstanceError, GenerationError
from satlab.rng import RandomSource, resolve_rng

logger = logging.getLogger(__name__)


def _as_boolvec(assignment: Union[BoolVec, Iterable[bool]]) -> BoolVec:
    if isinstance(assignment, BoolVec):
        return assignment
    return BoolVec.from_iterable(assignment)


class Instance:
    """
    A CNF formula together with a variable assignment.

    The length of the assignment defines the number of variables; it may
    exceed the highest variable any clause mentions.
    """

    def __init__(self, assignment: Union[BoolVec, Iterable[bool]], clauses: Iterable[Clause]):
        """
        Initialize the instance.

        Args:
            assignment: Truth value of every variable, indexed from zero
            clauses: Clauses of the formula, kept in order
        """
        self._assignment = _as_boolvec(assignment)
        self._clauses = list(clauses)

    @classmethod
    def with_variable_count(cls, num_variables: int, clauses: Iterable[Clause]) -> "Instance":
        """Create an instance with ``num_variables`` variables, all assigned false."""
        return cls(BoolVec(num_variables, False), clauses)

    @classmethod
    def from_formula(cls, formula: DimacsFormula) -> "Instance":
        """Build an all-false instance from parsed DIMACS data."""
        clauses = [Clause.from_raw_signed(values) for values in formula.clauses]
        instance = cls.with_variable_count(formula.num_variables, clauses)

        out_of_range = sum(
            1
            for clause in clauses
            for lit in clause.literals
            if lit.index() >= formula.num_variables
        )
        if out_of_range:
            logger.warning(
                f"{out_of_range} literal(s) reference variables beyond the declared "
                f"{formula.num_variables}; evaluating them will fail"
            )
        return instance

    @classmethod
    def load(cls, path: Union[str, os.PathLike]) -> "Instance":
        """
        Create an instance from a DIMACS CNF file.

        The assignment is all false: the format has no place for one.

        Raises:
            OSError: If the file cannot be read
            DimacsFormatError: If the file is not valid DIMACS CNF
        """
        formula = load_cnf_file(path)
        instance = cls.from_formula(formula)
        logger.info(
            f"Loaded {path}: {instance.variable_count} variables, {instance.clause_count} clauses"
        )
        return instance

    @classmethod
    def loads(cls, text: str) -> "Instance":
        """Create an instance from DIMACS CNF text."""
        return cls.from_formula(parse_dimacs(text))

    def save(self, path: Union[str, os.PathLike]) -> None:
        """
        Save the instance to a DIMACS CNF file.

        Only the clauses and the variable count are written.
        """
        save_cnf_file(path, self.variable_count, (c.as_raw_signed() for c in self._clauses))
        logger.info(f"Saved {self.clause_count} clauses to {path}")

    def dumps(self, comments: Optional[Iterable[str]] = None) -> str:
        """Return the instance as DIMACS CNF text."""
        return formula_to_dimacs(
            self.variable_count, (c.as_raw_signed() for c in self._clauses), comments
        )

    @classmethod
    def generate_random(
        cls,
        num_variables: int,
        num_clauses: int,
        clause_length: int,
        rng: RandomSource = None,
    ) -> "Instance":
        """
        Create a random k-SAT instance.

        Each clause draws ``clause_length`` distinct variables by rejection
        sampling and negates each independently with probability 1/2. The
        initial assignment is random as well.

        Args:
            num_variables: Number of variables ``n``
            num_clauses: Number of clauses ``m``
            clause_length: Literals per clause ``k``, at most ``n``
            rng: Random source; see ``satlab.rng.resolve_rng``

        Raises:
            GenerationError: If a count is negative or ``k > n``
        """
        if min(num_variables, num_clauses, clause_length) < 0:
            raise GenerationError(
                f"Counts must be non-negative: n={num_variables}, m={num_clauses}, k={clause_length}"
            )
        if clause_length > num_variables:
            raise GenerationError(
                f"Cannot pick {clause_length} distinct variables out of {num_variables}"
            )

        rng = resolve_rng(rng)

        assignment = BoolVec.from_numpy(rng.random(num_variables) < 0.5)

        clauses = []
        chosen: list[int] = []
        for _ in range(num_clauses):
            for _ in range(clause_length):
                idx = int(rng.integers(num_variables))
                while idx in chosen:
                    idx = int(rng.integers(num_variables))
                chosen.append(idx)

            negations = rng.random(clause_length) < 0.5
            clauses.append(Clause.from_indices(chosen, (bool(n) for n in negations)))
            chosen.clear()

        logger.debug(
            f"Generated random instance: n={num_variables}, m={num_clauses}, k={clause_length}"
        )
        return cls(assignment, clauses)

    def resample_assignment(self, rng: RandomSource = None) -> BoolVec:
        """Replace the assignment with independent random bits of the same length and return it."""
        rng = resolve_rng(rng)
        self._assignment = BoolVec.from_numpy(rng.random(self.variable_count) < 0.5)
        return self._assignment

    @property
    def assignment(self) -> BoolVec:
        return self._assignment

    @assignment.setter
    def assignment(self, value: Union[BoolVec, Iterable[bool]]) -> None:
        value = _as_boolvec(value)
        if len(value) != self.variable_count:
            raise ValueError(
                f"Assignment has {len(value)} values, instance has {self.variable_count} variables"
            )
        self._assignment = value

    @property
    def clauses(self) -> tuple[Clause, ...]:
        return tuple(self._clauses)

    @property
    def variable_count(self) -> int:
        return len(self._assignment)

    @property
    def clause_count(self) -> int:
        return len(self._clauses)

    def set_variable(self, index: int, value: bool) -> None:
        self._assignment.set(index, value)

    def flip_variable(self, index: int) -> None:
        self._assignment.negate(index)

    def count_satisfied(self) -> int:
        """Number of clauses satisfied by the current assignment."""
        return sum(1 for clause in self._clauses if clause.is_satisfied(self._assignment))

    def unsatisfied_clauses(self) -> list[Clause]:
        return [c for c in self._clauses if not c.is_satisfied(self._assignment)]

    def is_satisfied(self) -> bool:
        """True if the current assignment satisfies every clause."""
        return self.count_satisfied() == self.clause_count

    def satisfaction_ratio(self) -> float:
        """Fraction of satisfied clauses, 0.0 when there are no clauses."""
        if self.clause_count == 0:
            return 0.0
        return self.count_satisfied() / self.clause_count

    def clause_to_variable_ratio(self) -> float:
        """
        Return ``clause_count / variable_count``.

        Raises:
            DegenerateInstanceError: If the instance has no variables
        """
        if self.variable_count == 0:
            raise DegenerateInstanceError(
                f"Clause-to-variable ratio is undefined for {self.clause_count} clauses over 0 variables"
            )
        return self.clause_count / self.variable_count

    def __repr__(self) -> str:
        return f"Instance(variables={self.variable_count}, clauses={self.clause_count})"

    def __str__(self) -> str:
        return " ∧ ".join(str(c) for c in self._clauses)
