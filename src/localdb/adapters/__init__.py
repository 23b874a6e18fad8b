"""Adapters layer - concrete implementations of port interfaces.

Adapters provide the actual implementations:
- Inbound adapters: Turn statement text into typed statements
- Outbound adapters: Implement external dependencies (the JSON document)
"""

from localdb.adapters.outbound import JsonDocumentStore

__all__ = [
    # Outbound adapters
    "JsonDocumentStore",
]
