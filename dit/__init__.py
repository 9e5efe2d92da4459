"""A minimal content-addressed version control system with staging, commits and branches."""

__version__ = "0.1.0"