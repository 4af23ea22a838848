"""Domain models and errors.

Pure data structures (Pydantic v2) and the exception hierarchy; nothing here
knows about the CLI or the console.
"""
