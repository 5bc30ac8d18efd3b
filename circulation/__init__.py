"""
Newspaper circulation data-access layer.

See circulation.common.repositories for the public repository API.
"""

__version__ = "0.1.0"
