"""
Tests for the shared Buffer and the array generator.
"""

import pytest

from sequence import Buffer, generate
from config import VALUE_MIN, VALUE_MAX


class TestBuffer:

    def test_get_set_swap(self):
        buf = Buffer([1, 2, 3])
        buf.set(0, 9)
        buf.swap(1, 2)
        assert buf.snapshot() == (9, 3, 2)
        assert buf.get(1) == 3
        assert buf.length() == len(buf) == 3

    def test_counters_track_each_mutation(self):
        buf = Buffer([1, 2, 3])
        buf.swap(0, 2)
        buf.swap(1, 1)
        buf.set(0, 4)
        assert buf.swaps == 2
        assert buf.writes == 1

    def test_snapshot_is_independent_copy(self):
        source = [3, 1, 2]
        buf = Buffer(source)
        snap = buf.snapshot()
        buf.swap(0, 1)
        source.append(99)
        assert snap == (3, 1, 2)
        assert buf.snapshot() == (1, 3, 2)

    @pytest.mark.parametrize("index", [-1, 3, 100])
    def test_out_of_range_index_raises(self, index):
        buf = Buffer([1, 2, 3])
        with pytest.raises(IndexError):
            buf.get(index)
        with pytest.raises(IndexError):
            buf.set(index, 0)
        with pytest.raises(IndexError):
            buf.swap(0, index)
        assert buf.snapshot() == (1, 2, 3)

    def test_empty_buffer(self):
        buf = Buffer()
        assert len(buf) == 0
        assert buf.snapshot() == ()


class TestGenerate:

    def test_size_and_range(self):
        values = generate(200, seed=1)
        assert len(values) == 200
        assert all(VALUE_MIN <= v <= VALUE_MAX for v in values)

    def test_seed_is_reproducible(self):
        assert generate(30, seed=42) == generate(30, seed=42)

    def test_zero_size(self):
        assert generate(0) == []

    def test_invalid_arguments(self):
        with pytest.raises(ValueError):
            generate(-1)
        with pytest.raises(ValueError):
            generate(5, low=10, high=1)
