"""
High-level use cases for the Koma account API.

Each service loads a user document through the repository, applies the
domain rules, and writes the whole document back. Routers call these
services instead of manipulating the store directly.
"""
