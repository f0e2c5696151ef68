"""
eveclient is a small client for REST resources guarded by etags. See the
README for more details.
"""

__version__ = "0.1.0"

from .resource import create_resource  # noqa: E402

__all__ = ["create_resource", "__version__"]
