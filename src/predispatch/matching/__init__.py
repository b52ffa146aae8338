"""Matching — predicate trie and the dispatcher built on it.

Lookups walk one path of predicates, O(arity x edges-per-node).
"""
