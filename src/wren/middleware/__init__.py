"""Middleware: ``async (request, next) -> response`` callables."""

from wren.middleware.inject import HTMLInject
from wren.middleware.protocol import Middleware, Next

__all__ = ["HTMLInject", "Middleware", "Next"]
