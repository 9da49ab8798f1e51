"""Benchmark parsing and checking ISBNs."""

import numpy as np
import pytest

from isbnparts.isbn import check_gtins, is_valid, parse_isbn


@pytest.fixture
def gtins():
    return np.arange(9780000000000, 9780000000000 + 100_000, dtype=np.int64)


@pytest.fixture
def isbn_strings():
    # The last registration group of the range message is the slowest to find
    return ["979-8-200-12345-2", "978-1-4088-5589-8", "1-5266-4665-X"] * 1000


def parse_all(values):
    return [parse_isbn(x) for x in values]


def test_parse_isbn(benchmark, isbn_strings):
    benchmark(parse_all, isbn_strings)


def test_check_gtins(benchmark, gtins):
    benchmark(check_gtins, gtins)


def test_is_valid_one_by_one(benchmark, gtins):
    benchmark(lambda values: [is_valid(int(x)) for x in values], gtins[:10_000])
