"""FastAPI routers exposing the collections."""
