"""Infrastructure layer — concrete collaborator adapters.

Infrastructure may import from domain and config.
It must never import from services or context.
"""
