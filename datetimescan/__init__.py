"""Find datetimes in text and report counts, gaps and continuous activity."""

__version__ = "0.0.1"