import suite
from minseq import UnsupportedOperationError, Pair
from minseq.iterators import (
    MappedIterator, FilteredIterator, TypeFilteredIterator, FlatMappedIterator, ZippedIterator,
    ConcatenatedIterator, TakingWhileIterator, SkippingWhileIterator, TakingIterator, SkippingIterator
)

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal
assert_raises = suite.assert_raises


@test("has_next and peek are idempotent")
def test_lookahead_idempotent():
    it = FilteredIterator(iter([1, 2, 3, 4]), lambda x: x % 2 == 0)
    assert_that(it.has_next() and it.has_next(), "has_next should stay true")
    assert_equal(it.peek(), 2)
    assert_equal(it.peek(), 2, "peek must not advance")
    assert_equal(next(it), 2)
    assert_equal(next(it), 4)
    assert_that(not it.has_next(), "should be exhausted")
    assert_that(not it.has_next(), "exhaustion is permanent")


@test("adapters start lazily")
def test_not_started():
    pulled = []
    it = MappedIterator(iter([1, 2]), lambda x: pulled.append(x) or x * 10)
    assert_equal(pulled, [], "constructing an adapter should not pull")
    assert_equal(it.peek(), 10)
    assert_equal(pulled, [1])


@test("advancing past exhaustion follows the iterator protocol")
def test_exhaustion():
    it = TakingIterator(iter([1, 2, 3]), 1)
    assert_equal(list(it), [1])
    with assert_raises(StopIteration):
        next(it)
    with assert_raises(ValueError):
        it.peek()


@test("removal is never supported")
def test_remove_unsupported():
    adapters = [
        MappedIterator(iter([]), str),
        FilteredIterator(iter([]), bool),
        TypeFilteredIterator(iter([]), int),
        FlatMappedIterator(iter([]), list),
        ZippedIterator(iter([]), iter([])),
        ConcatenatedIterator(iter([])),
        TakingWhileIterator(iter([]), bool),
        SkippingWhileIterator(iter([]), bool),
        TakingIterator(iter([]), 1),
        SkippingIterator(iter([]), 1),
    ]
    for adapter in adapters:
        with assert_raises(UnsupportedOperationError, f"{type(adapter).__name__}.remove"):
            adapter.remove()
    assert_that(issubclass(UnsupportedOperationError, TypeError), "should be a TypeError")


@test("taking_while never resumes after the first failure")
def test_taking_while_stops():
    source = iter([1, 2, 5, 1, 2])
    it = TakingWhileIterator(source, lambda x: x < 3)
    assert_equal(list(it), [1, 2])
    assert_equal(list(it), [], "a second pass over the same adapter yields nothing")
    assert_equal(next(source), 1, "the adapter stops pulling after the failing element")


@test("skipping_while yields later matches once past the boundary")
def test_skipping_while_boundary():
    it = SkippingWhileIterator(iter([1, 2, 5, 1, 2]), lambda x: x < 3)
    assert_equal(list(it), [5, 1, 2])


@test("flat_mapped skips empty inner iterables and never yields phantoms")
def test_flat_mapped():
    it = FlatMappedIterator(iter([[], [1], [], [], [2, 3], []]), lambda x: x)
    assert_equal(list(it), [1, 2, 3])


@test("zipped yields pairs")
def test_zipped():
    it = ZippedIterator(iter("ab"), iter([1, 2, 3]))
    assert_equal(list(it), [Pair("a", 1), Pair("b", 2)])


@test("concatenated walks every source in order")
def test_concatenated():
    it = ConcatenatedIterator(iter([1]), iter([]), iter([2, 3]))
    assert_equal(list(it), [1, 2, 3])


@test("skipping drains short sources to empty")
def test_skipping():
    assert_equal(list(SkippingIterator(iter([1, 2, 3]), 2)), [3])
    assert_equal(list(SkippingIterator(iter([1, 2]), 5)), [])


if __name__ == "__main__":
    suite.run(title="minseq iterator test suite")
