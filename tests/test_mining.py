import pytest

from aprioriminer.dataset import construct_l1
from aprioriminer.mining import (
    apriori,
    apriori_algorithm_1,
    apriori_algorithm_2,
    apriori_tid_algorithm,
)

ROWS = [(1, 1), (1, 2), (1, 3), (2, 1), (2, 2), (3, 1), (3, 3), (4, 2), (4, 3)]


def _sets(table):
    return {frozenset(item_set) for item_set in table}


@pytest.fixture
def transactions(tmp_path):
    path = tmp_path / "ratings.csv"
    path.write_text("userId,movieId\n" + "".join(f"{b},{i}\n" for b, i in ROWS))
    return path


@pytest.fixture
def wide_transactions(tmp_path):
    path = tmp_path / "wide.csv"
    path.write_text(
        "userId,movieId,rating\n" + "".join(f"{b},{i},4.5\n" for b, i in ROWS)
    )
    return path


@pytest.mark.parametrize("algorithm", [apriori_algorithm_1, apriori_algorithm_2])
def test_support_two_finds_all_pairs(transactions, algorithm):
    result = algorithm(transactions, 2, 2, 1)
    expected = {
        frozenset({1}), frozenset({2}), frozenset({3}),
        frozenset({1, 2}), frozenset({1, 3}), frozenset({2, 3}),
    }
    assert _sets(result) == expected


@pytest.mark.parametrize("algorithm", [apriori_algorithm_1, apriori_algorithm_2])
def test_support_one_reaches_the_triple(transactions, algorithm):
    result = algorithm(transactions, 1, 2, 1)
    assert frozenset({1, 2, 3}) in _sets(result)


@pytest.mark.parametrize("algorithm", [apriori_algorithm_1, apriori_algorithm_2])
def test_high_support_keeps_only_singletons(transactions, algorithm):
    result = algorithm(transactions, 3, 2, 1)
    assert _sets(result) == _sets(construct_l1(transactions, 3, 2))


@pytest.mark.parametrize("algorithm", [apriori_algorithm_1, apriori_algorithm_2])
def test_support_above_row_count_is_empty(transactions, algorithm):
    assert not algorithm(transactions, len(ROWS) + 1, 2, 1)


@pytest.mark.parametrize("support", [1, 2, 3, 4])
def test_both_algorithms_agree(transactions, support):
    first = apriori_algorithm_1(transactions, support, 2, 1)
    second = apriori_algorithm_2(transactions, support, 2, 1)
    assert _sets(first) == _sets(second)


def test_every_subset_of_a_result_is_a_result(transactions):
    found = _sets(apriori_algorithm_1(transactions, 1, 2, 1))
    for item_set in found:
        for item_id in item_set:
            rest = item_set - {item_id}
            if rest:
                assert rest in found


def test_extra_columns_do_not_change_result(transactions, wide_transactions):
    narrow = apriori_algorithm_2(transactions, 2, 2, 1)
    wide = apriori_algorithm_2(wide_transactions, 2, 2, 1)
    assert _sets(narrow) == _sets(wide)


def test_apriori_dispatches(transactions):
    assert _sets(apriori(transactions, 2, 2, 1, 1)) == _sets(
        apriori_algorithm_1(transactions, 2, 2, 1)
    )
    assert _sets(apriori(transactions, 2, 2, 1, 2)) == _sets(
        apriori_algorithm_2(transactions, 2, 2, 1)
    )


def test_apriori_rejects_unknown_algorithm(transactions):
    with pytest.raises(ValueError):
        apriori(transactions, 2, 2, 1, 3)


@pytest.mark.parametrize("support", [0, 1, 2, 5])
def test_tid_algorithm_reports_frequent_singletons(transactions, support):
    result = apriori_tid_algorithm(transactions, support, 2, 1)
    assert _sets(result) == _sets(construct_l1(transactions, support, 2))


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        apriori_algorithm_1(tmp_path / "absent.csv", 1, 2, 1)