"""Performance benchmarks for scalaropt.

This package contains microbenchmarks comparing evaluation counts and
solve times of the one-dimensional minimization methods.
"""
