"""Tests for the canonical ledger order."""

import itertools
import random
from datetime import date

import pytest

from ledgerbook.domain.entities import Journal, JournalType, Transaction
from ledgerbook.domain.ordering import OrderingKey, compare_keys, key_for


def key(day, order=0, journal_id=1, identifier=0):
    return OrderingKey(date=date(2024, 1, day), order=order, journal_id=journal_id, identifier=identifier)


def test_earlier_date_comes_first():
    """Test that date dominates every other field."""
    assert key(1, order=0, journal_id=99) < key(2, order=50, journal_id=1)


def test_higher_order_comes_first_on_same_day():
    """Test that a larger order value sorts earlier within a day."""
    assert key(5, order=3) < key(5, order=1)
    assert not key(5, order=1) < key(5, order=3)


def test_journal_id_breaks_order_ties():
    """Test that journal ID ascends when date and order are equal."""
    assert key(5, order=2, journal_id=7) < key(5, order=2, journal_id=8)


def test_identifier_breaks_journal_ties():
    """Test that leg identifiers ascend within one journal."""
    assert key(5, journal_id=7, identifier=0) < key(5, journal_id=7, identifier=1)


def test_compare_keys():
    """Test the classic three-way comparator."""
    assert compare_keys(key(1), key(2)) == -1
    assert compare_keys(key(2), key(1)) == 1
    assert compare_keys(key(3), key(3)) == 0


def test_sort_key_matches_comparison():
    """Test that sorting by sort_key agrees with the rich comparison."""
    keys = [key(2, 1, 4), key(2, 3, 9), key(1, 0, 10), key(2, 3, 2, 1), key(2, 3, 2, 0)]
    assert sorted(keys) == sorted(keys, key=OrderingKey.sort_key)
    assert sorted(keys) == [key(1, 0, 10), key(2, 3, 2, 0), key(2, 3, 2, 1), key(2, 3, 9), key(2, 1, 4)]


def test_key_for_uses_journal_and_leg():
    """Test building a key from a journal and one of its legs."""
    journal = Journal(
        id=12,
        description="Rent",
        date=date(2024, 3, 1),
        order=4,
        journal_type=JournalType.WITHDRAWAL,
        completed=True,
        bill_id=None,
        created_at=None,
    )
    leg = Transaction(id=30, journal_id=12, account_id=1, amount=-5, identifier=2)
    assert key_for(journal, leg) == OrderingKey(date(2024, 3, 1), 4, 12, 2)


def test_comparison_with_other_types_is_not_supported():
    """Test that keys refuse to compare with unrelated objects."""
    with pytest.raises(TypeError):
        key(1) < (2024, 1, 1, 0)


class TestTotalOrder:
    """Property checks over shuffled generated keys."""

    @pytest.fixture
    def keys(self):
        rng = random.Random(20240101)
        tuples = {
            (date(2024, 1, rng.randint(1, 3)), rng.randint(0, 2), rng.randint(1, 4), rng.randint(0, 2))
            for _ in range(200)
        }
        generated = [OrderingKey(*values) for values in tuples]
        rng.shuffle(generated)
        return generated

    def test_irreflexive(self, keys):
        """Test that no key precedes itself."""
        assert all(not k < k for k in keys)

    def test_exactly_one_direction_for_distinct_keys(self, keys):
        """Test that distinct keys are always strictly ordered one way."""
        for a, b in itertools.combinations(keys, 2):
            assert (a < b) != (b < a)

    def test_transitive(self, keys):
        """Test transitivity over a sample of triples."""
        rng = random.Random(7)
        for _ in range(2000):
            a, b, c = rng.sample(keys, 3)
            if a < b and b < c:
                assert a < c

    def test_sorting_is_independent_of_input_order(self, keys):
        """Test that any shuffle sorts to the same sequence."""
        expected = sorted(keys)
        rng = random.Random(3)
        for _ in range(5):
            shuffled = list(keys)
            rng.shuffle(shuffled)
            assert sorted(shuffled) == expected
