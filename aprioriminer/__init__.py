"""Frequent itemset mining with the Apriori algorithm over CSV transaction files."""

__version__ = "0.1.0"

__all__ = ["cli", "dataset", "experiments", "generators", "itemsets", "mining", "tid"]