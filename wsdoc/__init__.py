"""Generate web-service reference documentation from annotated comments.

This package scans source files for ``wsdoc { ... wsdoc }`` comment blocks,
expands the payload dataclasses they reference, highlights glossary terms and
renders one HTML page per endpoint plus an index.

Exports
-------
- ``app``: Cyclopts application entry.
- ``main``: Convenience function that configures logging and invokes the app.

Examples
--------
>>> from wsdoc import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
