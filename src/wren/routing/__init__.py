"""Routing: a compiled route table built once when the app freezes."""
