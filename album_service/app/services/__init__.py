"""
Service layer abstraction.

The album store encapsulates the in‑memory collection and the
operations on it, keeping API handlers free of data handling.
"""
