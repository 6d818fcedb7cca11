import pytest

from aprioriminer.dataset import (
    Baskets,
    construct_baskets,
    construct_c1,
    construct_ck,
    construct_l1,
    read_column,
)
from aprioriminer.itemsets import ItemSet, ItemSetTable


def _write(tmp_path, text, name="data.csv"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def ratings(tmp_path):
    return _write(tmp_path, "user,item\n1,10\n1,20\n2,10\n3,30\n3,10\n")


def _contents(table):
    return sorted(tuple(sorted(s.items)) for s in table)


def test_read_column_items_in_first_seen_order(ratings):
    assert read_column(ratings, 2) == [10, 20, 30]


def test_read_column_baskets(ratings):
    assert read_column(ratings, 1) == [1, 2, 3]


def test_read_column_skips_header_only_file(tmp_path):
    path = _write(tmp_path, "user,item\n")
    assert read_column(path, 2) == []


def test_read_column_missing_field_raises(tmp_path):
    path = _write(tmp_path, "user,item\n1\n")
    with pytest.raises(ValueError):
        read_column(path, 2)


def test_read_column_rejects_zero_column(ratings):
    with pytest.raises(ValueError):
        read_column(ratings, 0)


def test_read_column_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_column(tmp_path / "absent.csv", 1)


def test_read_column_non_numeric_is_zero(tmp_path):
    path = _write(tmp_path, "a,b\n1,abc\n")
    assert read_column(path, 2) == [0]


def test_construct_c1_indexes_follow_positions():
    ids = [5, 105, 7]
    table = construct_c1(ids)
    assert len(table) == len(ids)
    assert [table.index_of(i) for i in ids] == [0, 1, 2]


def test_construct_l1_applies_support(ratings):
    assert _contents(construct_l1(ratings, 2, 2)) == [(10,)]


def test_construct_l1_support_one_keeps_all(ratings):
    assert _contents(construct_l1(ratings, 1, 2)) == [(10,), (20,), (30,)]


def test_construct_l1_high_support_is_empty(ratings):
    assert len(construct_l1(ratings, 100, 2)) == 0


def test_construct_ck_pairs_from_singletons():
    lk = ItemSetTable()
    for item_id in (1, 2, 3):
        lk.add(ItemSet([item_id]))
    ck = construct_ck(lk)
    assert _contents(ck) == [(1, 2), (1, 3), (2, 3)]
    assert all(s.k == 2 for s in ck)


def test_construct_ck_prunes_missing_subsets():
    lk = ItemSetTable()
    lk.add(ItemSet([1, 2]))
    lk.add(ItemSet([1, 3]))
    assert len(construct_ck(lk)) == 0


def test_construct_ck_keeps_candidates_with_all_subsets():
    lk = ItemSetTable()
    for pair in ([1, 2], [1, 3], [2, 3]):
        lk.add(ItemSet(pair))
    assert _contents(construct_ck(lk)) == [(1, 2, 3)]


def test_construct_baskets_bitmaps(ratings):
    baskets = construct_baskets(ratings, 2, 1)
    assert baskets.bitmaps == [[1, 1, 0], [1, 0, 0], [1, 0, 1]]
    assert baskets.count == 3


def test_construct_baskets_width_matches_items(ratings):
    baskets = construct_baskets(ratings, 2, 1)
    width = len(read_column(ratings, 2))
    assert all(len(bitmap) == width for bitmap in baskets)


def test_baskets_add_bitmap_copies():
    baskets = Baskets()
    bitmap = [1, 0]
    baskets.add_bitmap(bitmap)
    bitmap[0] = 0
    assert baskets[0] == [1, 0]
    assert len(baskets) == 1


def test_baskets_format_empty():
    assert Baskets().format() == "No baskets found\n"


def test_baskets_format_rows():
    baskets = Baskets()
    baskets.add_bitmap([1, 0])
    baskets.add_bitmap([0, 1])
    assert baskets.format() == "Basket 1 : 1 0 \nBasket 2 : 0 1 \n"