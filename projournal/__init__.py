"""projournal - keep a revision log for each of your project folders."""

__version__ = "0.1.0"
