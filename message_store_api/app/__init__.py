"""
Application package initializer.

This package contains the entrypoint for the API and its submodules.
The message record store lives in ``services``, its wire schemas in
``schemas`` and the HTTP routes in ``api/v1/endpoints``.  Versioning
is handled by grouping routers under the ``api/<version>/``
hierarchy.
"""

from .main import app  # noqa: F401
