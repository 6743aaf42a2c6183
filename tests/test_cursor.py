import pytest
from textloader.cursor import StreamingCursor
from textloader.exceptions import FormatError, InvariantViolation
from textloader.layout import infer_layout
from textloader.parsers import DenseParser

def open_cursor(write_file, text):
    path = write_file('data.tsv', text)
    f = open(path, 'rb')
    f.readline()
    return StreamingCursor(f, f.tell(), DenseParser(infer_layout(['y', 'f'])))

def test_construction_positions_on_first_row(write_file):
    with open_cursor(write_file, 'y\tf\n1\t10\n2\t20\n3\t30\n') as cursor:
        assert cursor.current.label == 1.0
        assert not cursor.is_cached

def test_move_next_walks_to_exhaustion(write_file):
    with open_cursor(write_file, 'y\tf\n1\t10\n2\t20\n3\t30\n') as cursor:
        labels = [cursor.current.label]
        while cursor.move_next():
            labels.append(cursor.current.label)
        assert labels == [1.0, 2.0, 3.0]
        assert cursor.current is None
        assert not cursor.move_next()

def test_reset_returns_to_first_row(write_file):
    with open_cursor(write_file, 'y\tf\n1\t10\n2\t20\n3\t30\n') as cursor:
        first = cursor.current
        cursor.move_next()
        cursor.move_next()
        cursor.reset()
        assert cursor.current == first
        assert cursor.current is not first

def test_cached_cursor_replays_without_file(write_file):
    cursor = open_cursor(write_file, 'y\tf\n1\t10\n2\t20\n3\t30\n')
    first = cursor.current
    assert cursor.cache() == 3
    assert cursor.is_cached
    assert cursor.closed
    assert [ex.label for ex in cursor] == [1.0, 2.0, 3.0]
    assert [ex.label for ex in cursor] == [1.0, 2.0, 3.0]
    cursor.reset()
    assert cursor.current == first
    assert cursor.move_next() and cursor.move_next()
    assert not cursor.move_next()
    assert cursor.current is None
    assert not cursor.move_next()

def test_iteration_restarts_from_first_row(write_file):
    with open_cursor(write_file, 'y\tf\n1\t10\n2\t20\n') as cursor:
        cursor.move_next()
        assert [ex.features.values[0] for ex in cursor] == [10.0, 20.0]

def test_bad_row_fails_only_that_move(write_file):
    with open_cursor(write_file, 'y\tf\n1\t10\n2\tx\n3\t30\n') as cursor:
        with pytest.raises(FormatError):
            cursor.move_next()
        assert cursor.move_next()
        assert cursor.current.label == 3.0

def test_reset_without_first_row_is_invariant_violation(write_file):
    path = write_file('data.tsv', 'y\tf\n1\t10\n')
    f = open(path, 'rb')
    f.readline()
    offset = f.tell()
    cursor = StreamingCursor(f, offset, DenseParser(infer_layout(['y', 'f'])))
    cursor.data_start_offset = len('y\tf\n1\t10\n')
    with pytest.raises(InvariantViolation):
        cursor.reset()
    cursor.close()

def test_close_is_idempotent(write_file):
    cursor = open_cursor(write_file, 'y\tf\n1\t10\n')
    cursor.close()
    cursor.close()
    assert cursor.closed
    with pytest.raises(ValueError):
        cursor.move_next()
