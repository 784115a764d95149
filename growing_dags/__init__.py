"""Grow a partial pathway DAG inside a weighted interactome, one cheapest path at a time."""

__version__ = "0.1.0"