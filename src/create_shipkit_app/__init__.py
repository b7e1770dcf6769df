"""create-shipkit-app - ShipKit project generator.

Scaffolds new ShipKit (Next.js) applications from bundled templates:
validates the request, resolves a template and feature set into a
project plan, renders the file tree, and optionally installs
dependencies and initializes a git repository.
"""

# Version information
__version__ = "0.2.0"

__all__ = ["__version__"]
