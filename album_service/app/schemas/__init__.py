"""
Pydantic schema definitions for API payloads.

Request bodies are validated against these models before anything
touches the album store.
"""
