# aprioriminer

Find frequent itemsets in transaction data stored as CSV, using the Apriori
algorithm.

## Input format

A CSV file with a header line, one row per (transaction, item) pair, and rows
of the same transaction next to each other:

```
transaction ID,items
1,12
1,515
2,12
2,608
```

Values are read as integers. Rows with fewer fields than the requested
columns raise `ValueError`. The command line reads transaction ids from the
first column and item ids from the second.

## Installation

```
pip install .
```

## Command line

Mine a file with the Apriori algorithm. The last argument picks the counting
strategy: `1` reads the file again on every pass, `2` keeps the baskets in
memory as bitmaps.

```
aprioriminer 1 ratings.csv 250 1
aprioriminer 1 ratings.csv 250 2
```

Run the transaction-id variant:

```
aprioriminer 2 ratings.csv 250
```

This variant prints only the frequent single items.

The command first prints a line naming the file and support, then every
frequent itemset on its own line, for example:

```
 2-k Itemset : { 12 , 515 }
```

Time the algorithm on randomly generated data while one parameter varies:

```
aprioriminer 3 1
```

The number after `3` chooses the varied parameter: `1` the probability that
an item appears in a transaction, `2` the number of transactions, `3` the
number of items, `4` the support. Each point writes a random data file
`DataRand.csv` in the current directory and times one run of the first
algorithm (processor time). The timings are written to
`execution_times.dat` and then handed to `gnuplot`; if `gnuplot` cannot be
started, the command reports an error after the data file has been written.

Running `aprioriminer` with no arguments prints a short usage text.

## Library use

```python
from aprioriminer.mining import apriori

frequent = apriori("ratings.csv", 250, 2, 1, 2)
print(frequent.format())
for item_set in frequent:
    print(item_set.items)
```

`apriori(path, support, item_column, basket_column, algorithm)` returns an
`ItemSetTable` (from `aprioriminer.itemsets`) holding every itemset found in
at least `support` transactions; `algorithm` is `1` or `2`, anything else
raises `ValueError`. Column numbers start at 1. `apriori_algorithm_1`,
`apriori_algorithm_2` and `apriori_tid_algorithm` in `aprioriminer.mining`
can be called directly.

Lower-level pieces:

- `aprioriminer.dataset`: `read_column`, `construct_c1`, `construct_l1`,
  `construct_ck`, `construct_baskets` and the `Baskets` bitmap container.
- `aprioriminer.itemsets`: `ItemSet`, `ItemSetTable`, `all_items_in_bitmap`.
- `aprioriminer.tid`: `TidMap`, used by the transaction-id variant.
- `aprioriminer.generators`: `generate_csv` and `generate_baskets_randomly`
  produce random test data; both accept a `random.Random` for repeatable
  output.
- `aprioriminer.experiments`: `get_execution_time` and the
  `run_experiment_*` functions behind `aprioriminer 3`.

## What it does not do

The package finds frequent itemsets only. It does not derive association
rules or compute confidence or lift, and it does not report support counts
for the itemsets it prints. The transaction-id variant returns the frequent
single items, not larger sets.

## Running the tests

```
pip install .[test]
pytest
```