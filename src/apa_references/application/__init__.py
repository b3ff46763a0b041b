"""Application layer helpers."""
