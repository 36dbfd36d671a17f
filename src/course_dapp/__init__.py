"""Rollup dApp back end for courses, lessons and learners."""

__version__ = "0.1.0"
