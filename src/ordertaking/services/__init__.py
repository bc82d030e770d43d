"""Service layer — the place-order workflow stages and their composition.

Services may import from domain, infrastructure, and config.
They must never import from context.
"""
