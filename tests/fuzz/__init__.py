"""Intensive property tests for ftlnumber.

Excluded from normal runs; run with: pytest -m fuzz

Python 3.13+.
"""
