"""
Persistence adapters.

The in-memory store is the source of truth; the JSON file adapter loads it at
startup and receives full snapshots after mutations.
"""
