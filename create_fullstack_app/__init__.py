"""create-fullstack-app -- scaffold a React project with a database-backed server.

Copies a frontend and a backend template into a new directory, merges their
``package.json`` manifests and READMEs, and starts the dependency install.
"""

__version__ = "1.0.0"
