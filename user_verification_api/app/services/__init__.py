"""
Service layer.

Request handlers for users and the "ready for verification"
notification sinks they report to.
"""
