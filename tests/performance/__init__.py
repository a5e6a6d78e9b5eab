"""
Performance Tests.

Benchmarks for the query pipeline over large generated datasets.
"""
