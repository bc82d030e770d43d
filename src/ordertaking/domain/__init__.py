"""Domain layer — value types, order lifecycle shapes, events, errors.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, config, or context.
"""
