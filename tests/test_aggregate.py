"""Tests for truth aggregation, sum, zip and dict."""

import pytest
from builtinkit import all, any, bool, dict, sum, zip


class TestTruth:
    def test_all(self):
        assert all([True])
        assert all([1, True, "non empty string", "0.0"])
        assert not all([0, True, "non empty string", "0.0"])
        assert not all([1, False, "non empty string", "0.0"])
        assert not all([1, True, "", "0.0"])
        assert not all([1, True, "non-empty string", 0.0])
        assert all([object()])

    def test_all_empty(self):
        assert all([]) is True

    def test_any(self):
        assert any([True])
        assert not any([False, 0])
        assert any([0, True, "", "0.0"])
        assert any([object(), False])

    def test_any_empty(self):
        assert any([]) is False

    def test_short_circuit(self):
        def gen():
            yield 0
            raise AssertionError("consumed too far")

        assert all(gen()) is False

    def test_bool(self):
        assert bool(False) is False
        assert bool(True) is True
        assert bool(0) is False
        assert bool(1) is True
        assert bool(0.0) is False
        assert bool("0.0") is True
        assert bool("") is False
        assert bool("a value") is True


class TestSum:
    def test_all_elements(self):
        assert sum([2, 2, 2, 2, 2]) == 10

    def test_start_is_an_index(self):
        assert sum([2, 2, 2, 2, 2], 1) == 8

    def test_start_past_end(self):
        assert sum([1, 2], 5) == 0

    def test_iterator(self):
        assert sum(iter([1.5, 2.5])) == 4.0

    def test_non_integer_start(self):
        with pytest.raises(TypeError):
            sum([1, 2], "1")


class TestZip:
    def test_pairs(self):
        labels = ["cat", "dog", "pig"]
        numbers = [12, 13, 15]
        assert zip(labels, numbers) == [("cat", 12), ("dog", 13), ("pig", 15)]

    def test_iterator_input(self):
        assert zip(iter(["cat", "dog"]), [12, 13]) == [("cat", 12), ("dog", 13)]

    def test_shortest_wins(self):
        result = zip([1, 2, 3], "ab", (True,) * 5)
        assert len(result) == 2
        assert result[1] == (2, "b", True)

    def test_no_inputs(self):
        assert zip() == []


class TestDict:
    def test_pairs(self):
        stats = [["cat", 12], ["dog", 13], ["guinea pig", 15]]
        assert dict(stats) == {"cat": 12, "dog": 13, "guinea pig": 15}

    def test_later_keys_win(self):
        assert dict([("a", 1), ("a", 2)]) == {"a": 2}

    def test_bad_pair(self):
        with pytest.raises(ValueError):
            dict([("a", 1, 2)])


class TestSumNegativeStart:
    def test_negative_start_counts_from_zero(self):
        assert sum([1, 2, 3], -1) == 6
        assert sum([1, 2, 3], -10) == 6
