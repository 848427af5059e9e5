import numpy as np
import pytest

from pyrunsplit import SequenceView, split_after, split_before
from pyrunsplit.views import slice_view


def test_numpy_runs_share_memory_with_source():
    a = np.arange(9, dtype=np.uint8)

    runs = list(split_before(a, lambda v: v == 2 or v == 5))

    assert [run.tolist() for run in runs] == [[0, 1], [2, 3, 4], [5, 6, 7, 8]]
    assert all(isinstance(run, np.ndarray) for run in runs)
    assert all(np.shares_memory(run, a) for run in runs)


def test_numpy_rows_are_elements():
    a = np.array([[0, 0], [1, 9], [2, 0], [3, 9]])

    runs = list(split_after(a, lambda row: row[1] == 9))

    assert [run.shape for run in runs] == [(2, 2), (2, 2)]
    assert np.array_equal(runs[1], a[2:])


def test_memoryview_runs_are_views():
    data = bytes([0, 1, 2])

    runs = list(split_after(memoryview(data), lambda v: v == 1))

    assert all(isinstance(run, memoryview) for run in runs)
    assert [bytes(run) for run in runs] == [b"\x00\x01", b"\x02"]


def test_range_runs_are_ranges():
    runs = list(split_before(range(6), lambda v: v == 3))

    assert runs == [range(0, 3), range(3, 6)]


def test_list_runs_read_through_to_source():
    source = [0, 1, 2, 3]

    first = split_after(source, lambda v: v == 1).next_run()
    source[0] = 42

    assert isinstance(first, SequenceView)
    assert first.source is source
    assert list(first) == [42, 1]


def test_tuple_and_bytes_sources():
    assert list(split_before((1, 2, 3), lambda v: v == 2)) == [(1,), (2, 3)]
    assert list(split_after(b"a,b", lambda v: v == ord(","))) == [b"a,", b"b"]


class TestSequenceView:
    @pytest.fixture
    def view(self):
        return SequenceView([10, 11, 12, 13, 14], 1, 4)

    def test_len_and_bounds(self, view):
        assert len(view) == 3
        assert (view.start, view.stop) == (1, 4)

    def test_indexing(self, view):
        assert view[0] == 11
        assert view[-1] == 13
        assert view[np.int64(1)] == 12

    def test_index_out_of_range(self, view):
        with pytest.raises(IndexError):
            view[3]
        with pytest.raises(IndexError):
            view[-4]

    def test_bad_index_type(self, view):
        with pytest.raises(TypeError):
            view["0"]

    def test_slicing_returns_nested_view(self, view):
        sub = view[1:]

        assert isinstance(sub, SequenceView)
        assert (sub.start, sub.stop) == (2, 4)
        assert sub == [12, 13]
        assert view[2:1] == []

    def test_strided_slice_rejected(self, view):
        with pytest.raises(ValueError):
            view[::2]

    def test_sequence_protocol(self, view):
        assert 12 in view
        assert view.index(13) == 2
        assert view.count(10) == 0
        assert list(reversed(view)) == [13, 12, 11]

    def test_equality(self, view):
        assert view == (11, 12, 13)
        assert view != [11, 12]
        assert view == SequenceView([0, 11, 12, 13], 1)
        assert view != 11

    def test_unhashable(self, view):
        with pytest.raises(TypeError):
            hash(view)

    def test_invalid_bounds(self):
        with pytest.raises(IndexError):
            SequenceView([1, 2], 1, 3)
        with pytest.raises(IndexError):
            SequenceView([1, 2], 2, 1)

    def test_repr(self, view):
        assert repr(view) == "SequenceView([11, 12, 13], start=1, stop=4)"


def test_slice_view_of_view_stays_a_view():
    base = SequenceView(list(range(10)), 2, 8)

    sub = slice_view(base, 1, 3)

    assert isinstance(sub, SequenceView)
    assert sub.source is base.source
    assert list(sub) == [3, 4]
