"""Configuration, logging and the in-memory user database."""
