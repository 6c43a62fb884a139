"""Performance benchmarks for optipath.

This package contains microbenchmarks for the path algorithms on random
graphs.
"""
