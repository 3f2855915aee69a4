"""
Use cases for the mock server.

Routers call CollectionService instead of touching the store or the data file
directly.
"""
