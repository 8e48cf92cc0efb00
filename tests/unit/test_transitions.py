import pytest

from pydfa.core.transitions import TransitionTable
from pydfa.core.types import Transition


@pytest.fixture
def table():
    return TransitionTable([
        ("q0", "0", "q0"),
        ("q0", "1", "q1"),
        ("q1", "1", "q1"),
    ])


class TestLookup:
    def test_lookup_returns_matching_rule(self, table):
        assert table.lookup("q0", "1") == Transition("q0", "1", "q1")

    def test_lookup_missing_rule_returns_none(self, table):
        assert table.lookup("q1", "0") is None

    def test_lookup_unknown_state_and_symbol(self, table):
        assert table.lookup("nowhere", "1") is None
        assert table.lookup("q0", "x") is None

    def test_next_state(self, table):
        assert table.next_state("q0", "0") == "q0"
        assert table.next_state("q1", "0") is None

    def test_successors(self, table):
        assert table.successors("q0") == [
            Transition("q0", "0", "q0"),
            Transition("q0", "1", "q1"),
        ]
        assert table.successors("q9") == []


class TestEnumeration:
    def test_all_symbols(self, table):
        assert table.all_symbols() == {"0", "1"}

    def test_all_states_includes_sources_and_destinations(self):
        table = TransitionTable([("a", "x", "b")])
        assert table.all_states() == {"a", "b"}

    def test_empty_table(self):
        table = TransitionTable()
        assert len(table) == 0
        assert table.all_states() == set()
        assert table.all_symbols() == set()

    def test_iteration_follows_insertion_order(self):
        rules = [Transition("q1", "b", "q0"), Transition("q0", "a", "q1")]
        assert list(TransitionTable(rules)) == rules

    def test_ordered(self):
        table = TransitionTable([("q1", "b", "q0"), ("q0", "a", "q1")])
        assert table.ordered() == [Transition("q0", "a", "q1"), Transition("q1", "b", "q0")]

    def test_contains(self, table):
        assert Transition("q0", "1", "q1") in table
        assert Transition("q0", "1", "q0") not in table
        assert ("q0", "1", "q1") not in table


class TestDeterminism:
    def test_conflicting_rules_raise(self):
        with pytest.raises(ValueError, match="non-deterministic"):
            TransitionTable([("q0", "a", "q1"), ("q0", "a", "q2")])

    def test_identical_rules_collapse(self):
        table = TransitionTable([("q0", "a", "q1"), ("q0", "a", "q1")])
        assert len(table) == 1

    def test_malformed_triple_raises(self):
        with pytest.raises(ValueError, match="triple"):
            TransitionTable([("q0", "a")])


class TestTransformations:
    def test_restrict_keeps_rules_inside_state_set(self, table):
        restricted = table.restrict({"q0"})
        assert list(restricted) == [Transition("q0", "0", "q0")]

    def test_restrict_does_not_mutate(self, table):
        table.restrict(set())
        assert len(table) == 3

    def test_rename_merges_and_deduplicates(self):
        table = TransitionTable([
            ("b", "x", "c"),
            ("a", "x", "c"),
            ("c", "x", "c"),
        ])
        renamed = table.rename({"b": "a"})
        assert list(renamed) == [
            Transition("a", "x", "c"),
            Transition("c", "x", "c"),
        ]

    def test_rename_output_is_sorted(self):
        table = TransitionTable([("z", "b", "y"), ("y", "a", "z")])
        assert list(table.rename({})) == [Transition("y", "a", "z"), Transition("z", "b", "y")]

    def test_equality_ignores_order(self):
        a = TransitionTable([("q0", "a", "q1"), ("q1", "a", "q0")])
        b = TransitionTable([("q1", "a", "q0"), ("q0", "a", "q1")])
        assert a == b
