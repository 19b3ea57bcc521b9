"""
citegraph.commands - CLI command implementations
"""

__all__ = [
    "load",
]
