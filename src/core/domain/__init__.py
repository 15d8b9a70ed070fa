"""Domain models and errors.

Pure data structures (pydantic v2) plus the adapter error taxonomy. Nothing
here knows about HTTP clients or the CLI.
"""
