import suite
from lazylist import L, LazyList, Cursor, Value, STOP

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

is_odd = lambda x: x % 2 == 1
odd_digits = L(range(1, 10)).filter(is_odd)


def drain(cursor):
    pairs = []
    while cursor.valid():
        pairs.append((cursor.key, cursor.current()))
        cursor.advance()
    return pairs


@test("indexed iteration over a list reports its own indices")
def test_indexed_from_array():
    data = [1, 2, 3]
    for index, element in L(data).indexed():
        assert_that(element == data[index], f"element at {index} should be {data[index]}")
    assert_that([k for k, _ in L(data).indexed()] == [0, 1, 2], "keys should be 0, 1, 2")


@test("indexed iteration over a producer")
def test_indexed_from_producer():
    seq = LazyList(lambda i: Value(i + 1) if i < 4 else STOP)
    assert_that(list(seq.indexed()) == [(0, 1), (1, 2), (2, 3), (3, 4)], "pairs should line up")


@test("filtered iteration has contiguous keys")
def test_indexed_filtered():
    pairs = list(odd_digits.indexed())
    assert_that(pairs == [(0, 1), (1, 3), (2, 5), (3, 7), (4, 9)], f"got {pairs}")


@test("plain iteration yields values only")
def test_iter_values():
    assert_that(list(odd_digits) == [1, 3, 5, 7, 9], "values in order")
    assert_that([x for x in L([])] == [], "empty list iterates nothing")


@test("iteration can be restarted with identical results")
def test_iteration_restart():
    first = list(odd_digits.indexed())
    for _, _ in zip(range(2), odd_digits.indexed()):
        pass  # partial pass
    second = list(odd_digits.indexed())
    assert_that(first == second, f"passes differ: {first} vs {second}")


@test("iteration probes each index once per pass")
def test_iteration_probe_count():
    calls = []
    def transform(x):
        calls.append(x)
        return x * 10
    list(L([1, 2, 3]).map(transform).indexed())
    assert_that(calls == [1, 2, 3], f"got {calls}")


@test("cursor walks a filtered list with contiguous keys")
def test_cursor_drain():
    pairs = drain(odd_digits.cursor())
    assert_that(pairs == [(0, 1), (1, 3), (2, 5), (3, 7), (4, 9)], f"got {pairs}")


@test("cursor accumulates skip offset and keeps it on advance")
def test_cursor_skip_offset():
    cursor = odd_digits.cursor()
    assert_that(cursor.current() == 1 and cursor.skip_offset == 0, "first value needs no skips")
    cursor.advance()
    assert_that(cursor.current() == 3, "second value is 3")
    assert_that((cursor.key, cursor.skip_offset) == (1, 1), repr(cursor))
    cursor.advance()
    assert_that(cursor.current() == 5, "third value is 5")
    assert_that((cursor.key, cursor.skip_offset) == (2, 2), repr(cursor))


@test("cursor resolution resumes where it stopped")
def test_cursor_resume():
    probes = []
    def producer(i):
        probes.append(i)
        return Value(i) if i < 10 else STOP
    cursor = LazyList(producer).filter(lambda x: x % 3 == 0).cursor()
    cursor.current()
    cursor.advance()
    cursor.current()
    assert_that(probes == [0, 1, 2, 3], f"got {probes}")
    probes.clear()
    cursor.current()
    assert_that(probes == [], f"re-reading the position should not probe again, got {probes}")


@test("cursor signals end on stop")
def test_cursor_end():
    cursor = L(['only']).cursor()
    assert_that(cursor.has_next(), "one element available")
    cursor.advance()
    assert_that(not cursor.valid(), "past the end")
    assert_raises(IndexError, cursor.current, "current past the end should fail")


@test("cursor reset rewinds both counters")
def test_cursor_reset():
    cursor = odd_digits.cursor()
    first = drain(cursor)
    assert_that(cursor.skip_offset > 0, "drain should have skipped")
    cursor.reset()
    assert_that((cursor.key, cursor.skip_offset) == (0, 0), repr(cursor))
    assert_that(drain(cursor) == first, "second pass should match the first")


@test("cursors from the same list are independent")
def test_independent_cursors():
    a = odd_digits.cursor()
    b = odd_digits.cursor()
    a.advance()
    a.advance()
    assert_that(a.current() == 5, "a moved ahead")
    assert_that(b.current() == 1, "b is still at the start")
    assert_that(isinstance(b, Cursor), "cursor() returns a Cursor")


@test("advancing without reading still lands on contiguous positions")
def test_cursor_blind_advance():
    cursor = odd_digits.cursor()
    cursor.advance()
    cursor.advance()
    assert_that(cursor.current() == 5, f"position 2 should be 5, got {cursor.current()}")
    assert_that((cursor.key, cursor.skip_offset) == (2, 2), repr(cursor))
    cursor.advance()
    cursor.advance()
    assert_that(cursor.current() == 9, f"position 4 should be 9, got {cursor.current()}")


@test("advancing on stop leaves the cursor at the end")
def test_cursor_advance_at_end():
    cursor = odd_digits.cursor()
    for _ in range(8):
        cursor.advance()
    assert_that(cursor.key == 5, f"key should stop at 5, got {cursor.key}")
    assert_that(not cursor.valid(), "cursor should be past the last value")


@test("valid, current and advance call map and filter once per position")
def test_cursor_call_cardinality():
    calls = []
    def transform(x):
        calls.append(x)
        return x * 10
    cursor = L([1, 2, 3]).map(transform).cursor()
    values = []
    while cursor.valid():
        values.append(cursor.current())
        cursor.advance()
    assert_that(values == [10, 20, 30], f"got {values}")
    assert_that(calls == [1, 2, 3], f"transform should run once per position, got {calls}")

    checks = []
    def is_odd_counted(x):
        checks.append(x)
        return x % 2 == 1
    drain(L(range(1, 6)).filter(is_odd_counted).cursor())
    assert_that(checks == [1, 2, 3, 4, 5], f"predicate should run once per index, got {checks}")


@test("cursor reset after a partial pass starts over")
def test_cursor_reset_partial():
    cursor = odd_digits.cursor()
    cursor.current()
    cursor.advance()
    cursor.advance()
    assert_that(cursor.current() == 5, "partial pass reached the third value")
    cursor.reset()
    assert_that((cursor.key, cursor.skip_offset) == (0, 0), repr(cursor))
    assert_that(cursor.current() == 1, "reset should return to the first value")
    assert_that(drain(cursor) == [(0, 1), (1, 3), (2, 5), (3, 7), (4, 9)], "full pass after reset")


if __name__ == "__main__":
    suite.main(title="lazylist cursor test suite")
