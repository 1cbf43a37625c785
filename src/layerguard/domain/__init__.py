"""Domain layer — layer graph, resolution, and boundary evaluation.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""
