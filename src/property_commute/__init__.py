"""Commute-aware property digests built on the Booli and Skånetrafiken APIs."""

__version__ = "0.1.0"
