"""Decode terminal mouse reports into events and inspect keyboard escape sequences."""

__version__ = "0.1.0"