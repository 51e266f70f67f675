"""
Unit tests for SAT instances: loading, saving, evaluation and random generation.
"""

import os
import shutil
import tempfile
import unittest

import numpy as np

from satlab.boolvec import BoolVec
from satlab.clause import Clause
from satlab.exceptions import (
    DegenerateInstanceError,
    DimacsFormatError,
    GenerationError,
    VariableIndexError,
)
from satlab.instance import Instance

EXAMPLE_CNF = "p cnf 3 2\n1 -2 0\n-1 3 0\n"


class TestInstanceLoading(unittest.TestCase):
    """Test cases for reading instances from DIMACS files."""

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.path = os.path.join(self.test_dir, "example.cnf")
        with open(self.path, "w") as f:
            f.write(EXAMPLE_CNF)

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def test_load_example(self):
        instance = Instance.load(self.path)

        self.assertEqual(instance.variable_count, 3)
        self.assertEqual(instance.assignment, BoolVec(3, False))
        self.assertEqual(
            instance.clauses,
            (Clause.from_raw_signed([1, -2]), Clause.from_raw_signed([-1, 3])),
        )
        self.assertEqual([str(c) for c in instance.clauses], ["(x0 ∨ ¬x1)", "(¬x0 ∨ x2)"])

    def test_load_accepts_path_objects(self):
        from pathlib import Path

        instance = Instance.load(Path(self.path))
        self.assertEqual(instance.clause_count, 2)

    def test_wrong_problem_type_fails(self):
        bad_path = os.path.join(self.test_dir, "bad.cnf")
        with open(bad_path, "w") as f:
            f.write("p wff 3 2\n1 -2 0\n-1 3 0\n")

        with self.assertRaises(DimacsFormatError):
            Instance.load(bad_path)

    def test_truncated_file_fails(self):
        bad_path = os.path.join(self.test_dir, "short.cnf")
        with open(bad_path, "w") as f:
            f.write("p cnf 3 5\n1 -2 0\n")

        with self.assertRaises(DimacsFormatError):
            Instance.load(bad_path)

    def test_missing_file_propagates_os_error(self):
        with self.assertRaises(FileNotFoundError):
            Instance.load(os.path.join(self.test_dir, "nope.cnf"))

    def test_out_of_range_literal_is_logged(self):
        with self.assertLogs("satlab.instance", level="WARNING") as logs:
            instance = Instance.loads("p cnf 2 1\n1 -3 0\n")

        self.assertIn("1 literal(s)", logs.output[0])
        with self.assertRaises(VariableIndexError):
            instance.count_satisfied()

    def test_loads(self):
        instance = Instance.loads(EXAMPLE_CNF)
        self.assertEqual(instance.clause_count, 2)
        self.assertEqual(instance.variable_count, 3)


class TestInstanceEvaluation(unittest.TestCase):
    """Test cases for satisfaction queries."""

    def setUp(self):
        self.instance = Instance.loads(EXAMPLE_CNF)

    def test_partial_satisfaction(self):
        self.instance.assignment = [False, True, False]

        first, second = self.instance.clauses
        self.assertFalse(first.is_satisfied(self.instance.assignment))
        self.assertTrue(second.is_satisfied(self.instance.assignment))
        self.assertEqual(self.instance.count_satisfied(), 1)
        self.assertFalse(self.instance.is_satisfied())
        self.assertEqual(self.instance.unsatisfied_clauses(), [first])
        self.assertAlmostEqual(self.instance.satisfaction_ratio(), 0.5)

    def test_full_satisfaction(self):
        self.instance.assignment = BoolVec.from_iterable([True, False, True])

        self.assertEqual(self.instance.count_satisfied(), 2)
        self.assertTrue(self.instance.is_satisfied())
        self.assertEqual(self.instance.unsatisfied_clauses(), [])

    def test_flip_and_set_variable(self):
        self.instance.flip_variable(1)
        self.assertEqual(self.instance.count_satisfied(), 1)

        self.instance.set_variable(0, True)
        self.instance.set_variable(2, True)
        self.instance.flip_variable(1)
        self.assertTrue(self.instance.is_satisfied())

        with self.assertRaises(VariableIndexError):
            self.instance.flip_variable(3)

    def test_assignment_length_is_checked(self):
        with self.assertRaises(ValueError):
            self.instance.assignment = [True, False]

    def test_no_clauses(self):
        instance = Instance.with_variable_count(4, [])
        self.assertEqual(instance.count_satisfied(), 0)
        self.assertTrue(instance.is_satisfied())
        self.assertEqual(instance.satisfaction_ratio(), 0.0)

    def test_clause_to_variable_ratio(self):
        self.assertAlmostEqual(self.instance.clause_to_variable_ratio(), 2 / 3)

        instance = Instance.with_variable_count(0, [Clause()])
        with self.assertRaises(DegenerateInstanceError):
            instance.clause_to_variable_ratio()
        with self.assertRaises(ZeroDivisionError):
            instance.clause_to_variable_ratio()

    def test_variable_count_may_exceed_referenced_variables(self):
        instance = Instance.with_variable_count(10, [Clause.from_raw_signed([1, -2])])
        self.assertEqual(instance.variable_count, 10)
        self.assertTrue(instance.is_satisfied())


class TestInstanceSaving(unittest.TestCase):
    """Test cases for writing instances to DIMACS files."""

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def test_save_format(self):
        instance = Instance.loads(EXAMPLE_CNF)
        path = os.path.join(self.test_dir, "out.cnf")
        instance.save(path)

        with open(path) as f:
            self.assertEqual(f.read(), EXAMPLE_CNF)

    def test_round_trip_keeps_clauses_not_assignment(self):
        instance = Instance.generate_random(30, 60, 3, rng=np.random.default_rng(7))
        path = os.path.join(self.test_dir, "random.cnf")
        instance.save(path)

        loaded = Instance.load(path)
        self.assertEqual(loaded.clauses, instance.clauses)
        self.assertEqual(loaded.variable_count, 30)
        self.assertEqual(loaded.assignment, BoolVec(30, False))

    def test_dumps_with_comments(self):
        instance = Instance.with_variable_count(2, [Clause.from_raw_signed([-2]), Clause()])
        self.assertEqual(
            instance.dumps(comments=["note"]),
            "c note\np cnf 2 2\n-2 0\n0\n",
        )
        self.assertEqual(Instance.loads(instance.dumps()).clauses, instance.clauses)


class TestRandomGeneration(unittest.TestCase):
    """Test cases for random instances and assignment resampling."""

    def test_shape_and_distinct_variables(self):
        instance = Instance.generate_random(10, 200, 4, rng=np.random.default_rng(3))

        self.assertEqual(instance.variable_count, 10)
        self.assertEqual(instance.clause_count, 200)
        for clause in instance.clauses:
            indices = [lit.index() for lit in clause.literals]
            self.assertEqual(len(indices), 4)
            self.assertEqual(len(set(indices)), 4)
            self.assertTrue(all(0 <= i < 10 for i in indices))

    def test_k_equal_to_n_uses_every_variable(self):
        instance = Instance.generate_random(5, 20, 5, rng=11)
        for clause in instance.clauses:
            self.assertEqual(sorted(lit.index() for lit in clause.literals), [0, 1, 2, 3, 4])

    def test_seeded_generation_is_reproducible(self):
        a = Instance.generate_random(20, 50, 3, rng=42)
        b = Instance.generate_random(20, 50, 3, rng=42)

        self.assertEqual(a.clauses, b.clauses)
        self.assertEqual(a.assignment, b.assignment)

    def test_default_random_source(self):
        instance = Instance.generate_random(8, 5, 3)
        self.assertEqual(instance.clause_count, 5)

    def test_negations_and_assignment_vary(self):
        instance = Instance.generate_random(50, 100, 3, rng=5)
        negations = [lit.is_negated() for c in instance.clauses for lit in c.literals]

        self.assertIn(True, negations)
        self.assertIn(False, negations)
        self.assertTrue(0 < instance.assignment.count_true() < 50)

    def test_k_larger_than_n_is_rejected(self):
        with self.assertRaises(GenerationError):
            Instance.generate_random(2, 1, 3)

    def test_negative_counts_are_rejected(self):
        with self.assertRaises(GenerationError):
            Instance.generate_random(3, -1, 2)

    def test_invalid_random_source(self):
        with self.assertRaises(TypeError):
            Instance.generate_random(3, 1, 2, rng="seed")

    def test_resample_assignment(self):
        instance = Instance.loads(EXAMPLE_CNF)
        rng = np.random.default_rng(0)

        new_assignment = instance.resample_assignment(rng)
        self.assertIs(new_assignment, instance.assignment)
        self.assertEqual(len(new_assignment), 3)

        seen = {tuple(instance.resample_assignment(rng)) for _ in range(64)}
        self.assertGreater(len(seen), 1)
        self.assertEqual(instance.clause_count, 2)


if __name__ == "__main__":
    unittest.main()
