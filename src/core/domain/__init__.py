"""Domain values.

Pure data structures (Pydantic v2): request payloads, request/response values
and the sample data. The domain knows nothing about HTTP or the CLI.
"""
