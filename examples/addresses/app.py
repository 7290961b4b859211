"""Addresses: a dependent State select that refreshes when Country changes.

Picking a country swaps only the State region of the form, so every
other field keeps what the user typed. Without JavaScript the "Select
country" button submits the whole form by GET and the page comes back
with every field pre-populated, so both paths end in the same form.

Demonstrates:
- ``data-trigger-group`` / ``data-trigger-source`` / ``data-trigger-target``
- ``Page`` with ``region_blocks`` (full page or the State block)
- ``form_from()`` binding a GET query or a POST body to one dataclass
- ``validate()`` with rules that depend on the chosen country
- ``StaticChoices`` as the country → state lookup

Run:
    python app.py
"""

import threading
from dataclasses import dataclass, replace
from pathlib import Path

from wren import App, AppConfig, NotFound, Page, Redirect, Request, Template, ValidationError
from wren.choices import Choice, StaticChoices
from wren.http.forms import form_from, form_values
from wren.validation import Validator, max_length, one_of, required, validate

TEMPLATES_DIR = Path(__file__).parent / "templates"

config = AppConfig(template_dir=TEMPLATES_DIR)
app = App(config=config)

DEFAULT_COUNTRY = "US"

# ---------------------------------------------------------------------------
# Reference data: an illustrative slice, not a complete dataset
# ---------------------------------------------------------------------------

COUNTRIES = (
    Choice("CA", "Canada"),
    Choice("US", "United States"),
    Choice("VA", "Vatican City"),
)

_CANADA = (
    ("AB", "Alberta"),
    ("BC", "British Columbia"),
    ("MB", "Manitoba"),
    ("NB", "New Brunswick"),
    ("NL", "Newfoundland and Labrador"),
    ("NT", "Northwest Territories"),
    ("NS", "Nova Scotia"),
    ("NU", "Nunavut"),
    ("ON", "Ontario"),
    ("PE", "Prince Edward Island"),
    ("QC", "Quebec"),
    ("SK", "Saskatchewan"),
    ("YT", "Yukon"),
)

_UNITED_STATES = (
    ("AL", "Alabama"),
    ("AK", "Alaska"),
    ("AZ", "Arizona"),
    ("AR", "Arkansas"),
    ("CA", "California"),
    ("CO", "Colorado"),
    ("CT", "Connecticut"),
    ("DE", "Delaware"),
    ("DC", "District of Columbia"),
    ("FL", "Florida"),
    ("GA", "Georgia"),
    ("HI", "Hawaii"),
    ("ID", "Idaho"),
    ("IL", "Illinois"),
    ("IN", "Indiana"),
    ("IA", "Iowa"),
    ("KS", "Kansas"),
    ("KY", "Kentucky"),
    ("LA", "Louisiana"),
    ("ME", "Maine"),
    ("MD", "Maryland"),
    ("MA", "Massachusetts"),
    ("MI", "Michigan"),
    ("MN", "Minnesota"),
    ("MS", "Mississippi"),
    ("MO", "Missouri"),
    ("MT", "Montana"),
    ("NE", "Nebraska"),
    ("NV", "Nevada"),
    ("NH", "New Hampshire"),
    ("NJ", "New Jersey"),
    ("NM", "New Mexico"),
    ("NY", "New York"),
    ("NC", "North Carolina"),
    ("ND", "North Dakota"),
    ("OH", "Ohio"),
    ("OK", "Oklahoma"),
    ("OR", "Oregon"),
    ("PA", "Pennsylvania"),
    ("RI", "Rhode Island"),
    ("SC", "South Carolina"),
    ("SD", "South Dakota"),
    ("TN", "Tennessee"),
    ("TX", "Texas"),
    ("UT", "Utah"),
    ("VT", "Vermont"),
    ("VA", "Virginia"),
    ("WA", "Washington"),
    ("WV", "West Virginia"),
    ("WI", "Wisconsin"),
    ("WY", "Wyoming"),
)

regions = StaticChoices(
    COUNTRIES,
    {
        "CA": [Choice(code, name) for code, name in _CANADA],
        "US": [Choice(code, name) for code, name in _UNITED_STATES],
    },
)


# ---------------------------------------------------------------------------
# Data model
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class AddressForm:
    """What the form submits. Every field is optional at bind time."""

    country: str = DEFAULT_COUNTRY
    line1: str = ""
    line2: str = ""
    city: str = ""
    state: str = ""
    postal_code: str = ""


@dataclass(frozen=True, slots=True)
class Address:
    id: int
    country: str
    line1: str
    line2: str
    city: str
    state: str
    postal_code: str

    @property
    def street(self) -> str:
        return " ".join(part for part in (self.line1, self.line2) if part)

    @property
    def locality(self) -> str:
        """``New York, New York 10013, United States``."""
        state = regions.name_of(self.state, self.country) or self.state
        region = " ".join(part for part in (state, self.postal_code) if part)
        country = regions.name_of(self.country) or self.country
        return ", ".join(part for part in (self.city, region, country) if part)


# ---------------------------------------------------------------------------
# In-memory storage
# ---------------------------------------------------------------------------

_addresses: list[Address] = []
_lock = threading.Lock()
_next_id = 1


def _get_addresses() -> list[Address]:
    with _lock:
        return list(_addresses)


def _get_address(address_id: int) -> Address | None:
    with _lock:
        for address in _addresses:
            if address.id == address_id:
                return address
        return None


def _add_address(form: AddressForm) -> Address:
    global _next_id
    with _lock:
        address = Address(id=_next_id, **form_values(form))
        _next_id += 1
        _addresses.append(address)
        return address


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def _address_rules(country: str) -> dict[str, list[Validator]]:
    """Rules for an address; State is required only where states exist."""
    rules: dict[str, list[Validator]] = {
        "country": [required, one_of(regions.codes())],
        "line1": [required, max_length(200)],
        "line2": [max_length(200)],
        "city": [required, max_length(100)],
        "postal_code": [required, max_length(20)],
    }
    states = regions.codes(country)
    if states:
        rules["state"] = [required, one_of(states)]
    return rules


def _form_context(form: AddressForm, errors: dict[str, list[str]] | None = None) -> dict:
    return {
        "form": form,
        "countries": regions.roots(),
        "states": regions.children(form.country),
        "errors": errors or {},
    }


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


@app.route("/")
def index():
    """List saved addresses."""
    return Template("addresses/index.html", addresses=_get_addresses())


@app.route("/addresses/new")
def new_address(request: Request):
    """The form, or just its State region for a region-scoped request.

    The enhanced path sends ``?country=CA`` alone; the no-script path
    sends every field. Both bind through the same dataclass.
    """
    form = form_from(request.query, AddressForm)
    return Page(
        "addresses/new.html",
        "address_form",
        region_blocks={"address_state": "state_field"},
        **_form_context(form),
    )


@app.route("/addresses", methods=["POST"])
async def create_address(request: Request):
    """Save a valid address, or re-render the form with 422."""
    form = form_from(await request.form(), AddressForm)
    result = validate(form_values(form), _address_rules(form.country))
    if not result:
        context = _form_context(form, result.errors)
        if request.is_fragment:
            return ValidationError("addresses/new.html", "address_form", **context)
        return Template("addresses/new.html", **context), 422

    if not regions.codes(form.country):
        form = replace(form, state="")
    address = _add_address(form)
    return Redirect(f"/addresses/{address.id}")


@app.route("/addresses/{address_id:int}")
def show_address(address_id: int):
    address = _get_address(address_id)
    if address is None:
        raise NotFound(f"No address {address_id}")
    return Template("addresses/show.html", address=address)


if __name__ == "__main__":
    app.run()
