"""Outbound ports (driven adapters interfaces)."""

from localdb.ports.outbound.document_store import DocumentStore

__all__ = ["DocumentStore"]
