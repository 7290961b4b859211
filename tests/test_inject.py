"""Tests for HTMLInject and the frame-controls snippet injection."""

from wren import App, AppConfig
from wren.http.response import Response
from wren.middleware.inject import HTMLInject
from wren.testing import TestClient, assert_is_fragment

PAGE = "<html><body><form data-trigger-group></form></body></html>"
MARKER = 'data-wren="frame-controls"'


def _app(**config: object) -> App:
    app = App(AppConfig(**config))  # type: ignore[arg-type]

    @app.route("/page")
    def page() -> str:
        return PAGE

    @app.route("/region")
    def region() -> Response:
        return Response(body='<div id="address_state"></div>').with_render_intent("fragment")

    @app.route("/data")
    def data() -> dict[str, str]:
        return {"body": "</body>"}

    return app


class TestFrameControlsInjection:
    async def test_full_page_gets_snippet_once(self) -> None:
        async with TestClient(_app()) as client:
            response = await client.get("/page")
        assert response.text.count(MARKER) == 1
        assert response.text.index(MARKER) < response.text.index("</body>")

    async def test_fragment_request_is_untouched(self) -> None:
        async with TestClient(_app()) as client:
            response = await client.fragment("/page", target="address_state")
        assert MARKER not in response.text

    async def test_fragment_intent_is_untouched(self) -> None:
        async with TestClient(_app()) as client:
            response = await client.get("/region")
        assert_is_fragment(response)

    async def test_non_html_is_untouched(self) -> None:
        async with TestClient(_app()) as client:
            response = await client.get("/data")
        assert MARKER not in response.text

    async def test_disabled_by_config(self) -> None:
        async with TestClient(_app(frame_controls=False)) as client:
            response = await client.get("/page")
        assert MARKER not in response.text


class TestHTMLInject:
    async def test_appends_when_target_missing(self) -> None:
        app = App()
        app.add_middleware(HTMLInject("<!-- tail -->"))

        @app.route("/")
        def index() -> str:
            return "<p>hi</p>"

        async with TestClient(app) as client:
            response = await client.get("/")
        assert response.text.startswith("<p>hi</p><!-- tail -->")

    async def test_full_page_only_skips_bodyless_html(self) -> None:
        app = App(AppConfig(frame_controls=False))
        app.add_middleware(HTMLInject("<!-- tail -->", full_page_only=True))

        @app.route("/")
        def index() -> str:
            return "<p>hi</p>"

        async with TestClient(app) as client:
            response = await client.get("/")
        assert response.text == "<p>hi</p>"
