"""Tests for the addresses example: the dependent State select, both paths."""

from wren.testing import (
    Browser,
    TestClient,
    assert_fragment_contains,
    assert_is_fragment,
    assert_query,
    assert_redirect,
    assert_select_options,
)

VALID_ADDRESS = {
    "country": "US",
    "line1": "1384 Broadway",
    "line2": "Floor 20",
    "city": "New York",
    "state": "NY",
    "postal_code": "10013",
}


class TestSavingAddresses:
    async def test_saves_a_valid_address(self, browser: Browser) -> None:
        await browser.visit("/addresses/new")
        with browser.within("section", "New address"):
            await browser.select("United States", from_="Country")
            await browser.fill_in("Line 1", "1384 Broadway")
            await browser.fill_in("Line 2", "Floor 20")
            await browser.fill_in("City", "New York")
            await browser.select("New York", from_="State")
            await browser.fill_in("Postal code", "10013")
            await browser.click_on("Create Address")

        assert browser.url == "/addresses/1"
        with browser.within("section", "1384 Broadway Floor 20"):
            assert browser.has_text("New York, New York 10013, United States")
        assert browser.alerts() == ()

    async def test_rejects_an_invalid_address(self, browser: Browser) -> None:
        await browser.visit("/addresses/new")
        with browser.within("section", "New address"):
            await browser.fill_in("Line 1", "1384 Broadway")
            await browser.click_on("Create Address")

        assert browser.response is not None
        assert browser.response.status == 422
        with browser.within("section", "New address"):
            assert "City can't be blank" in browser.alerts()
            assert browser.field_value("Line 1") == "1384 Broadway"

    async def test_post_redirects_to_the_saved_address(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.post("/addresses", form=VALID_ADDRESS)
            assert_redirect(response, "/addresses/1")

            page = await client.get("/addresses/1")
            assert page.status == 200
            assert "New York, New York 10013, United States" in page.text

            index = await client.get("/")
            assert "1384 Broadway Floor 20" in index.text

    async def test_state_must_belong_to_the_country(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.post("/addresses", form={**VALID_ADDRESS, "country": "CA"})
            assert response.status == 422
            assert "State is not included in the list" in response.text

    async def test_country_without_states_needs_no_state(self, example_app) -> None:
        form = {**VALID_ADDRESS, "country": "VA", "city": "Vatican City", "postal_code": "00120"}
        del form["state"]
        async with TestClient(example_app) as client:
            response = await client.post("/addresses", form=form)
            assert_redirect(response, "/addresses/1")
            page = await client.get("/addresses/1")
            assert "Vatican City, 00120, Vatican City" in page.text

    async def test_region_scoped_submit_returns_form_fragment(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.post(
                "/addresses",
                form={"line1": "1384 Broadway"},
                headers={"HX-Request": "true"},
            )
            assert_is_fragment(response, status=422)
            assert_fragment_contains(response, "be blank")
            assert_fragment_contains(response, 'role="alert"')

    async def test_unknown_address_is_404(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/addresses/99")
            assert response.status == 404


class TestSelectingCountry:
    async def test_refreshes_states_and_preserves_fields(self, browser: Browser) -> None:
        await browser.visit("/addresses/new")
        with browser.within("section", "New address"):
            await browser.fill_in("Line 1", "1384 Broadway")

            await browser.select("Vatican City", from_="Country")
            assert not browser.has_field("State")

            await browser.select("Canada", from_="Country")
            assert browser.selected_option("State") == "Alberta"

        with browser.within("section", "New address"):
            assert browser.field_value("Line 1") == "1384 Broadway"

    async def test_sends_only_the_changed_field(self, browser: Browser) -> None:
        await browser.visit("/addresses/new")
        await browser.fill_in("Line 1", "1384 Broadway")
        await browser.select("Canada", from_="Country")

        region_visits = [visit for visit in browser.history if visit.region is not None]
        assert len(region_visits) == 1
        assert region_visits[0].region == "address_state"
        assert_query(region_visits[0].url, [("country", "CA")])

    async def test_fallback_button_is_hidden_with_scripts(self, browser: Browser) -> None:
        await browser.visit("/addresses/new")
        assert not browser.has_button("Select country")
        assert browser.has_button("Create Address")

    async def test_no_script_fallback_submits_every_field(self, no_script_browser: Browser) -> None:
        browser = no_script_browser
        await browser.visit("/addresses/new")
        with browser.within("section", "New address"):
            await browser.fill_in("Line 1", "1384 Broadway")

            await browser.select("Vatican City", from_="Country")
            await browser.click_on("Select country")
            assert not browser.has_field("State")

            await browser.select("Canada", from_="Country")
            await browser.click_on("Select country")
            assert browser.selected_option("State") == "Alberta"
            assert browser.field_value("Line 1") == "1384 Broadway"

        assert browser.history[-1].region is None
        assert_query(
            browser.history[-1].url,
            [
                ("country", "CA"),
                ("line1", "1384 Broadway"),
                ("line2", ""),
                ("city", ""),
                ("postal_code", ""),
            ],
        )

    async def test_state_fragment_for_region_request(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.fragment("/addresses/new?country=CA", target="address_state")
            assert_is_fragment(response)
            assert 'id="address_state"' in response.text
            assert "Line 1" not in response.text
            assert_select_options(response.text, "state", [
                "Alberta",
                "British Columbia",
                "Manitoba",
                "New Brunswick",
                "Newfoundland and Labrador",
                "Northwest Territories",
                "Nova Scotia",
                "Nunavut",
                "Ontario",
                "Prince Edward Island",
                "Quebec",
                "Saskatchewan",
                "Yukon",
            ])

    async def test_cleared_country_renders_no_states(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.fragment("/addresses/new?country=", target="address_state")
            assert_is_fragment(response)
            assert "<select" not in response.text

    async def test_full_page_prepopulates_from_query(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get(
                "/addresses/new?country=US&line1=1384%20Broadway&city=New%20York&state=NY"
            )
            assert response.status == 200
            assert 'value="1384 Broadway"' in response.text
            assert '<option value="NY" selected>' in response.text
            assert 'data-wren="frame-controls"' in response.text
