"""Kida template integration and the handler return types it renders."""

from wren.templating.returns import Fragment, Page, Template, ValidationError

__all__ = ["Fragment", "Page", "Template", "ValidationError"]
