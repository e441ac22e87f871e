"""Inkwell blogging backend: follow graph, likes and comments over FastAPI and SQLModel."""
