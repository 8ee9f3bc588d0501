"""fortune-kind - print a random quote from a corpus of fortune files."""

__version__ = "0.1.0"
