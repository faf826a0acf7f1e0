"""HTTP API, models and SQL statement builder for university records kept in MySQL."""

__version__ = "0.1.0"