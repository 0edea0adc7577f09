"""Vacancy tracking and positional candidate shortlisting."""

__version__ = "0.1.0"
