import numpy as np
import pandas as pd
import suite
from faker import Faker
from minseq import S, of, empty, from_range, repeat, generate

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal
assert_raises = suite.assert_raises

# --- test data ---
Faker.seed(7)
fake = Faker()
products = [
    {'sku': fake.unique.bothify('??-####'), 'price': fake.pyfloat(min_value=5, max_value=500, right_digits=2)}
    for _ in range(20)
]


@test("to.list, to.tuple and to.set materialize the elements")
def test_basic_conversions():
    assert_equal(of(1, 2, 3, 4).to.list(), [1, 2, 3, 4])
    assert_equal(of(1, 2).to.tuple(), (1, 2))
    assert_equal(of(1, 2, 2, 3).to.set(), {1, 2, 3})
    assert_equal(empty().to.list(), [])


@test("to.list returns a fresh list each time")
def test_list_is_copy():
    source = [1, 2]
    materialized = S(source).to.list()
    materialized.append(3)
    assert_equal(source, [1, 2])


@test("to.array builds a numpy array")
def test_array():
    arr = from_range(1, 4).map(lambda x: x * 1.5).to.array()
    assert_that(isinstance(arr, np.ndarray), "should be a numpy array")
    assert_that(np.array_equal(arr, np.array([1.5, 3.0, 4.5, 6.0])), f"got {arr}")


@test("to.dict maps keys to values")
def test_dict():
    mapping = of(1, 2, 3).to.dict(str, lambda x: x * x)
    assert_equal(mapping, {"1": 1, "2": 4, "3": 9})
    assert_equal(of("a", "bb").to.dict(len), {1: "a", 2: "bb"})


@test("to.dict lets later elements win on duplicate keys")
def test_dict_collisions():
    mapping = of(("k", 1), ("k", 2), ("j", 3)).to.dict(lambda p: p[0], lambda p: p[1])
    assert_equal(mapping, {"k": 2, "j": 3})


@test("to.dict over realistic records")
def test_dict_records():
    prices = S(products).to.dict(lambda p: p['sku'], lambda p: p['price'])
    assert_equal(len(prices), len(products))
    assert_that(all(5 <= price <= 500 for price in prices.values()), "prices should stay in range")


@test("to.pandas and to.df build pandas objects")
def test_pandas():
    series = of(3, 1, 2).to.pandas()
    assert_that(isinstance(series, pd.Series), "should be a series")
    assert_equal(series.tolist(), [3, 1, 2])

    frame = S(products).filter(lambda p: p['price'] > 100).to.df()
    assert_that(isinstance(frame, pd.DataFrame), "should be a dataframe")
    assert_equal(list(frame.columns), ['sku', 'price'])
    assert_that(bool((frame['price'] > 100).all()), "filter should carry into the frame")


@test("to.add_to fills an existing collection")
def test_add_to():
    target = [1, 2]
    returned = of(3, 4).to.add_to(target)
    assert_that(returned is target, "should return the same collection")
    assert_equal(target, [1, 2, 3, 4])
    assert_equal(of(1, 1, 2).to.add_to({0}), {0, 1, 2})
    with assert_raises(TypeError):
        of(1).to.add_to((1, 2))


@test("to.count counts all or matching elements")
def test_count():
    assert_equal(from_range(0, 10).to.count(), 10)
    assert_equal(from_range(0, 10).to.count(lambda x: x % 3 == 0), 4)
    assert_equal(S(x for x in "abc").to.count(), 3)


@test("repeat and generate produce sized sequences")
def test_repeat_generate():
    assert_equal(repeat("x", 3).to.list(), ["x", "x", "x"])
    assert_equal(repeat("x", 3)._size, 3)
    counter = iter(range(100))
    generated = generate(lambda: next(counter), 4)
    assert_equal(generated.to.list(), [0, 1, 2, 3])
    assert_equal(generated.to.list(), [4, 5, 6, 7], "the supplier runs again on every traversal")
    with assert_raises(ValueError):
        repeat("x", -1)


if __name__ == "__main__":
    suite.run(title="minseq terminal test suite")
