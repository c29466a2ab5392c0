"""
Core utilities shared across the Koma account API.

This package hosts configuration helpers (env vars, store URL, save mode),
password hashing, logging setup and the error taxonomy. Services and
routers depend on these primitives instead of reading os.environ or
building responses by hand.
"""
