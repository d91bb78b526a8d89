"""
Pydantic schema definitions.

Request payloads, stored records and handler results all live here so
the handlers, the fake HTTP client and the API share one vocabulary.
"""
