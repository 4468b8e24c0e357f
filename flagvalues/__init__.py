"""Typed command-line flag values: strings, integers, integer lists, IP addresses and networks parsed from text."""

__version__ = "0.1.0"