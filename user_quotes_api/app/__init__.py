"""
Application package initializer.

The API is organised into layers: ``entities`` and ``schemas`` hold
the data shapes, ``repositories`` the storage contract and its
backends, ``clients`` the external quote provider, ``services`` the
business logic and ``api`` the HTTP routes.  ``core`` contains
configuration, logging, database helpers and the error kinds.
"""

from .main import app  # noqa: F401
