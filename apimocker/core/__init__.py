"""
Cross-cutting helpers: settings, logging setup and the reader/writer lock
that guards the store.
"""
