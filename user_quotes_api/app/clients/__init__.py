"""Clients for external collaborators."""

from .quote_client import QuoteClient, RandomQuoteClient

__all__ = ["QuoteClient", "RandomQuoteClient"]
