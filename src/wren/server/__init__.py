"""ASGI server pipeline: handler, negotiation, error pages, dev server."""
