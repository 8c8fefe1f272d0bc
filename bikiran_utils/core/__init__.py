"""Core utilities and shared application primitives.

Modules in this package cover configuration, console output, request
metadata, validation and the FastAPI glue that turns failures into
response envelopes.
"""
