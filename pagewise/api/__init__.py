"""FastAPI bindings."""
