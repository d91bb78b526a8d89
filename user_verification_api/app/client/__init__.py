"""The fake HTTP client that scripts requests against the handlers."""
