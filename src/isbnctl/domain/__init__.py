"""Domain layer: checksums, normalization, registration table, ISBN value.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
