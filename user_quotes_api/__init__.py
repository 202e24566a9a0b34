"""
Top‑level package for the User Quotes API.

All functionality lives in submodules under ``app``; the ASGI
application is ``user_quotes_api.app.main:app``.
"""

__all__ = []
