"""Tests for wren.frames.relay: activation of a group's targets."""

from bs4 import BeautifulSoup, Tag

from wren.frames import ChangeEvent, TriggerGroup, TriggerRelay

PAGE = """
<main>
  <form id="one" data-trigger-group>
    <select name="country" data-trigger-source><option>US</option></select>
    <a id="first" data-trigger-target href="/a">a</a>
    <a id="second" data-trigger-target href="/b">b</a>
  </form>
  <select id="outside" name="other"><option>x</option></select>
</main>
"""


def _relay(html: str = PAGE) -> tuple[BeautifulSoup, TriggerRelay, list[Tag]]:
    doc = BeautifulSoup(html, "html.parser")
    activated: list[Tag] = []
    relay = TriggerRelay(TriggerGroup(doc.find("form")), activated.append)
    return doc, relay, activated


class TestActivation:
    def test_each_target_once_in_document_order(self) -> None:
        doc, relay, activated = _relay()
        event = ChangeEvent.from_control(doc.find("select"))
        returned = relay.on_source_changed(event)
        assert [el["id"] for el in activated] == ["first", "second"]
        assert returned == tuple(activated)

    def test_no_debounce(self) -> None:
        doc, relay, activated = _relay()
        event = ChangeEvent.from_control(doc.find("select"))
        for _ in range(3):
            relay.on_source_changed(event)
        assert len(activated) == 6

    def test_event_from_outside_the_container_is_ignored(self) -> None:
        doc, relay, activated = _relay()
        event = ChangeEvent.from_control(doc.find(id="outside"))
        assert relay.on_source_changed(event) == ()
        assert activated == []

    def test_zero_targets_is_a_no_op(self) -> None:
        html = '<form><select name="c" data-trigger-source></select></form>'
        doc, relay, activated = _relay(html)
        assert relay.on_source_changed(ChangeEvent.from_control(doc.find("select"))) == ()
        assert activated == []

    def test_targets_added_after_construction_are_found(self) -> None:
        doc, relay, activated = _relay()
        late = doc.new_tag("a", attrs={"id": "late", "data-trigger-target": "", "href": "/c"})
        doc.find("form").append(late)
        relay.on_source_changed(ChangeEvent.from_control(doc.find("select")))
        assert [el["id"] for el in activated] == ["first", "second", "late"]
