"""Utilities for rendering wsdoc reference pages."""

from .page_generator import ReferencePageBuilder
from .renderer import HtmlContentRenderer

__all__ = ["HtmlContentRenderer", "ReferencePageBuilder"]
