"""Configuration, logging, error types and the in‑memory person store."""
