"""Infrastructure layer — source discovery and the Project object.

May import from domain and config. Must never import from services,
commands, or output.
"""
