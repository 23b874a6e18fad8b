"""Ports layer - interfaces between the application and its adapters."""

from localdb.ports.outbound import DocumentStore

__all__ = ["DocumentStore"]
