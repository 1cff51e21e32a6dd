"""
Top‑level package for the Message Store API.

This file makes ``message_store_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``message_store_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
