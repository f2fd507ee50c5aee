"""Species catalog browsing and per-trainer team rosters."""

__version__ = "0.1.0"
