"""Test utilities for wren applications.

An in-process ASGI test client, a headless browser that runs the frame
behaviors, and fragment/htmx assertion helpers::

    from wren.testing import Browser, TestClient, assert_is_fragment
"""

from wren.testing.assertions import (
    assert_fragment_contains,
    assert_fragment_not_contains,
    assert_hx_reswap,
    assert_hx_retarget,
    assert_hx_trigger,
    assert_is_error_fragment,
    assert_is_fragment,
    assert_query,
    assert_redirect,
    assert_select_options,
    hx_headers,
)
from wren.testing.browser import Browser, ElementNotFound, Visit
from wren.testing.client import TestClient

__all__ = [
    "Browser",
    "ElementNotFound",
    "TestClient",
    "Visit",
    "assert_fragment_contains",
    "assert_fragment_not_contains",
    "assert_hx_reswap",
    "assert_hx_retarget",
    "assert_hx_trigger",
    "assert_is_error_fragment",
    "assert_is_fragment",
    "assert_query",
    "assert_redirect",
    "assert_select_options",
    "hx_headers",
]
