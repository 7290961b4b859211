"""Tests for the injected frame-controls script.

The script runs in V8 (mini-racer). URL helpers are checked against
their Python counterparts; the change listener runs against a small
attribute-only DOM stub.
"""

import json

import pytest
from py_mini_racer import MiniRacer

from wren.frames.document import replace_query
from wren.http.query import encode_pair
from wren.server.frame_controls import FRAME_CONTROLS_JS, FRAME_CONTROLS_SNIPPET, FRAME_URL_JS

# Elements know only attribute-presence selectors ("[name]"), which is
# all the script uses.
DOM_STUB = """
var listeners={},clicked=[],all=[];
function El(attrs,children,props){
  this.attrs=attrs;this.children=children||[];this.parentElement=null;this.hidden=false;
  for(var k in props||{})this[k]=props[k];
  for(var i=0;i<this.children.length;i++)this.children[i].parentElement=this;
  all.push(this);
}
function attrOf(sel){return sel.slice(1,-1)}
El.prototype.getAttribute=function(n){return n in this.attrs?this.attrs[n]:null};
El.prototype.setAttribute=function(n,v){this.attrs[n]=String(v)};
El.prototype.matches=function(sel){return attrOf(sel) in this.attrs};
El.prototype.closest=function(sel){
  for(var el=this;el;el=el.parentElement){if(el.matches(sel))return el}
  return null;
};
El.prototype.querySelectorAll=function(sel){
  var out=[];
  (function walk(el){
    for(var i=0;i<el.children.length;i++){
      if(el.children[i].matches(sel))out.push(el.children[i]);
      walk(el.children[i]);
    }
  })(this);
  return out;
};
El.prototype.click=function(){clicked.push(this.getAttribute("href"))};
var root=new El({},[]);
var window={};
var document={
  readyState:"complete",
  addEventListener:function(type,fn){listeners[type]=fn},
  querySelectorAll:function(sel){return root.querySelectorAll(sel)}
};
function mount(el){root.children.push(el);el.parentElement=root}
function change(el){listeners.change({target:el})}
"""


@pytest.fixture
def js() -> MiniRacer:
    ctx = MiniRacer()
    ctx.eval(FRAME_URL_JS)
    return ctx


@pytest.fixture
def page() -> MiniRacer:
    ctx = MiniRacer()
    ctx.eval(DOM_STUB)
    return ctx


def _run(ctx: MiniRacer, setup: str) -> dict:
    ctx.eval(setup)
    ctx.eval(FRAME_CONTROLS_JS)
    ctx.eval("change(source)")
    return json.loads(ctx.eval("JSON.stringify({clicked: clicked, targets: all.filter("
                               "function(e){return 'data-trigger-target' in e.attrs})"
                               ".map(function(e){return e.attrs})})"))


class TestSnippet:
    def test_snippet_wraps_script(self) -> None:
        assert FRAME_CONTROLS_SNIPPET.startswith('<script data-wren="frame-controls">')
        assert FRAME_CONTROLS_SNIPPET.endswith("</script>")

    def test_url_helpers_are_part_of_the_script(self) -> None:
        assert FRAME_URL_JS in FRAME_CONTROLS_JS


class TestUrlParity:
    @pytest.mark.parametrize(
        "value",
        ["CA", "New York", "", "a&b=c", "1+1", "50%", "x#y", "a/b?c", "it's (ok)!*", "Zürich", "~_.-"],
    )
    def test_pair_matches_encode_pair(self, js: MiniRacer, value: str) -> None:
        assert js.call("pairOf", "country", value) == encode_pair("country", value)

    def test_absent_value(self, js: MiniRacer) -> None:
        assert js.call("pairOf", "country", None) == encode_pair("country", None) == "country="

    def test_reserved_name(self, js: MiniRacer) -> None:
        assert js.call("pairOf", "a b&c", "1") == encode_pair("a b&c", "1")

    @pytest.mark.parametrize(
        "url",
        [
            "/addresses/new",
            "/addresses/new?country=US&line1=x",
            "/states#list",
            "/states?x=1#list",
            "/a?",
            "https://example.com/s?a=1#f",
        ],
    )
    def test_with_query_matches_replace_query(self, js: MiniRacer, url: str) -> None:
        for value in ("CA", "New York", "", "a&b#c"):
            pair = js.call("pairOf", "country", value)
            assert js.call("withQuery", url, pair) == replace_query(url, "country", value)


class TestChangeListener:
    def test_installs_once(self, page: MiniRacer) -> None:
        page.eval(FRAME_CONTROLS_JS)
        page.eval("var first=listeners.change;listeners.change=null")
        page.eval(FRAME_CONTROLS_JS)
        assert page.eval("listeners.change===null")

    def test_rewrites_each_attribute_then_clicks(self, page: MiniRacer) -> None:
        result = _run(
            page,
            """
            var source=new El({name:"country","data-trigger-source":""},[],{name:"country",value:"CA"});
            var target=new El({"data-trigger-target":"","hx-get":"/addresses/state_field?x=1",
                               href:"/addresses/new?x=1#top"});
            mount(new El({"data-trigger-group":"address"},[source,target]));
            """,
        )
        assert result["clicked"] == ["/addresses/new?country=CA#top"]
        (attrs,) = result["targets"]
        assert attrs["hx-get"] == "/addresses/state_field?country=CA"

    def test_nested_group_target_fires_once(self, page: MiniRacer) -> None:
        result = _run(
            page,
            """
            var source=new El({"data-trigger-source":""},[],{name:"c",value:"CA"});
            var inner=new El({"data-trigger-group":"inner"},
                             [source,new El({"data-trigger-target":"",href:"/s"})]);
            mount(new El({"data-trigger-group":"outer"},
                         [new El({"data-trigger-target":"",href:"/outer"}),inner]));
            """,
        )
        assert result["clicked"] == ["/s?c=CA"]

    def test_unnamed_source_clicks_without_rewriting(self, page: MiniRacer) -> None:
        result = _run(
            page,
            """
            var source=new El({"data-trigger-source":""},[],{name:"",value:"CA"});
            mount(new El({"data-trigger-group":""},
                         [source,new El({"data-trigger-target":"",href:"/s?x=1"})]));
            """,
        )
        assert result["clicked"] == ["/s?x=1"]

    def test_non_source_control_is_ignored(self, page: MiniRacer) -> None:
        result = _run(
            page,
            """
            var source=new El({name:"line1"},[],{name:"line1",value:"x"});
            mount(new El({"data-trigger-group":""},
                         [source,new El({"data-trigger-target":"",href:"/s"})]));
            """,
        )
        assert result["clicked"] == []

    def test_hides_fallbacks_on_load(self, page: MiniRacer) -> None:
        page.eval('var fb=new El({"data-trigger-fallback":""});mount(new El({},[fb]))')
        page.eval(FRAME_CONTROLS_JS)
        assert page.eval("fb.hidden") is True
