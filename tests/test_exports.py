"""Tests for the lazy top-level exports of the wren package."""

import pytest

import wren


class TestLazyExports:
    @pytest.mark.parametrize("name", wren.__all__)
    def test_every_export_resolves(self, name: str) -> None:
        assert getattr(wren, name) is not None

    def test_export_is_the_defining_object(self) -> None:
        from wren.templating.returns import Page

        assert wren.Page is Page

    def test_unknown_name(self) -> None:
        with pytest.raises(AttributeError, match="no attribute 'Nope'"):
            wren.Nope  # noqa: B018

    def test_version(self) -> None:
        assert wren.__version__ == "0.1.0"
