"""Outbound adapters - implementations of outbound ports."""

from localdb.adapters.outbound.json_document_store import JsonDocumentStore

__all__ = [
    "JsonDocumentStore",
]
