"""Frame controls: the client half of the trigger-group behaviors.

Delegated ``change`` listener on the document. When the changed control
is a source of its nearest ``[data-trigger-group]`` container, it first
rewrites the query of each address attribute on the group's targets to
the single ``name=value`` pair, then clicks each target so htmx (or the
browser) performs the target's navigation. Region-scoped targets carry
``hx-target``; htmx swaps only that region and the rest of the form
keeps its state. Targets inside a nested group belong to that group.

Fallback controls (``[data-trigger-fallback]``) are hidden on load and
after every swap, so a page without JavaScript keeps them visible.

Injected into every full-page HTML response via ``HTMLInject``
middleware. Disabled with ``AppConfig(frame_controls=False)``.
"""

# Pure URL helpers, shared with wren.frames.document.replace_query:
# withQuery(url, pairOf(name, value)) == replace_query(url, name, value)
FRAME_URL_JS = """\
function enc(s){
  return encodeURIComponent(s==null?"":String(s)).replace(/[!'()*]/g,function(c){
    return "%"+c.charCodeAt(0).toString(16).toUpperCase();
  });
}
function pairOf(name,value){return enc(name)+"="+enc(value)}
function withQuery(url,pair){
  var h=url.indexOf("#"),frag=h<0?"":url.slice(h);
  if(h>=0)url=url.slice(0,h);
  var q=url.indexOf("?");
  if(q>=0)url=url.slice(0,q);
  return url+"?"+pair+frag;
}
"""

FRAME_CONTROLS_JS = (
    """\
(function(){
  if(window.__wrenFrameControls)return;
  window.__wrenFrameControls=true;
  var ADDR=["hx-get","href","formaction"],GROUP="[data-trigger-group]";
"""
    + FRAME_URL_JS
    + """\
  function hideFallbacks(root){
    var scope=root&&root.querySelectorAll?root:document;
    var els=scope.querySelectorAll("[data-trigger-fallback]");
    for(var i=0;i<els.length;i++){els[i].hidden=true}
    if(scope.matches&&scope.matches("[data-trigger-fallback]"))scope.hidden=true;
  }
  function groupOf(el){return el.parentElement&&el.parentElement.closest(GROUP)}
  function fire(group,src){
    var sel=group.getAttribute("data-trigger-targets")||"[data-trigger-target]";
    var found=group.querySelectorAll(sel),targets=[];
    for(var k=0;k<found.length;k++){if(groupOf(found[k])===group)targets.push(found[k])}
    if(src.name){
      var pair=pairOf(src.name,src.value);
      for(var i=0;i<targets.length;i++){
        for(var a=0;a<ADDR.length;a++){
          var v=targets[i].getAttribute(ADDR[a]);
          if(v!==null)targets[i].setAttribute(ADDR[a],withQuery(v,pair));
        }
        if(window.htmx)htmx.process(targets[i]);
      }
    }
    for(var j=0;j<targets.length;j++){targets[j].click()}
  }
  document.addEventListener("change",function(e){
    var src=e.target;
    if(!src||!src.closest)return;
    var group=groupOf(src);
    if(!group)return;
    var sel=group.getAttribute("data-trigger-sources")||"[data-trigger-source]";
    if(src.matches(sel))fire(group,src);
  });
  if(document.readyState==="loading"){
    document.addEventListener("DOMContentLoaded",function(){hideFallbacks(document)});
  }else{hideFallbacks(document)}
  document.addEventListener("htmx:load",function(e){hideFallbacks(e.target)});
})();
"""
)

FRAME_CONTROLS_SNIPPET = (
    '<script data-wren="frame-controls">' + FRAME_CONTROLS_JS + "</script>"
)
