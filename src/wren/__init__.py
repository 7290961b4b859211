"""Wren: dependent-select forms from server-rendered HTML.

A form field (a country) refreshes one region of the page (its states)
when it changes, and the page works the same without JavaScript.

Basic usage::

    from wren import App, AppConfig, Page, Request
    from wren.choices import Choice, StaticChoices

    app = App(AppConfig(template_dir="templates"))
    regions = StaticChoices([Choice("CA", "Canada")], {"CA": [Choice("AB", "Alberta")]})

    @app.route("/addresses/new")
    def new_address(request: Request) -> Page:
        country = request.query.get("country", "CA")
        return Page("addresses/new.html", "address_form",
                    region_blocks={"address_state": "state_field"},
                    country=country, states=regions.children(country))

    app.run()
"""

from importlib import import_module

__version__ = "0.1.0"

# Public name -> defining module, imported on first access so that
# ``import wren`` stays cheap.
_EXPORTS: dict[str, str] = {
    "App": "wren.app",
    "AppConfig": "wren.config",
    "ConfigurationError": "wren.errors",
    "Fragment": "wren.templating.returns",
    "HTTPError": "wren.errors",
    "MethodNotAllowed": "wren.errors",
    "Middleware": "wren.middleware.protocol",
    "Next": "wren.middleware.protocol",
    "NotFound": "wren.errors",
    "Page": "wren.templating.returns",
    "Redirect": "wren.http.response",
    "Request": "wren.http.request",
    "Response": "wren.http.response",
    "Template": "wren.templating.returns",
    "ValidationError": "wren.templating.returns",
    "WrenError": "wren.errors",
    "get_request": "wren.context",
}

__all__ = sorted(_EXPORTS)


def __getattr__(name: str) -> object:
    module = _EXPORTS.get(name)
    if module is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(import_module(module), name)
