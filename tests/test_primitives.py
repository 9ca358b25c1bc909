"""Tests for the lazy producers."""

import types
import pytest
from builtinkit import enumerate, filter, map, reversed


class TestEnumerate:
    def test_default_start(self):
        e = enumerate(["a", "b", "c"])
        assert isinstance(e, types.GeneratorType)
        assert list(e) == [(0, "a"), (1, "b"), (2, "c")]

    def test_start_at_one(self):
        assert list(enumerate(["a", "b", "c"], 1)) == [(1, "a"), (2, "b"), (3, "c")]

    def test_index_matches_position(self):
        seq = list("hello")
        pairs = list(enumerate(seq, 10))
        for i, pair in zip(range(len(seq)), pairs):
            assert pair == (10 + i, seq[i])

    def test_single_pass(self):
        e = enumerate([1, 2])
        assert list(e) == [(0, 1), (1, 2)]
        assert list(e) == []

    def test_non_integer_start(self):
        with pytest.raises(TypeError):
            list(enumerate([1], 1.5))


class TestFilter:
    def test_truthiness(self):
        assert list(filter(None, [0, 1, 2, 3, False, 4])) == [1, 2, 3, 4]

    def test_predicate(self):
        def keep(x):
            return x == 0 and x is not False or bool(x)

        assert list(filter(keep, [0, 1, 2, 3, False, 4])) == [0, 1, 2, 3, 4]

    def test_lazy(self):
        seen = []

        def predicate(x):
            seen.append(x)
            return True

        f = filter(predicate, [1, 2, 3])
        assert seen == []
        assert next(f) == 1
        assert seen == [1]


class TestMap:
    def test_extra_args(self):
        assert list(map(lambda x, n: x * 10 + n, [1, 2], 1)) == [11, 21]

    def test_no_extra_args(self):
        assert list(map(str.upper, ["a", "b"])) == ["A", "B"]

    def test_lazy(self):
        calls = []
        m = map(calls.append, [1, 2])
        assert calls == []
        next(m)
        assert calls == [1]


class TestReversed:
    def test_sequence(self):
        assert list(reversed([1, 2, 3])) == [3, 2, 1]

    def test_with_count(self):
        assert list(reversed([1, 2, 3], 3)) == [3, 2, 1]

    def test_count_limits_range(self):
        assert list(reversed([1, 2, 3, 4], 2)) == [2, 1]

    def test_iterator_input(self):
        assert list(reversed(iter([1, 2, 3]))) == [3, 2, 1]

    def test_empty(self):
        assert list(reversed([])) == []
