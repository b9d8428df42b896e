"""FastAPI integration for the secret protection layer."""
