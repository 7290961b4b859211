"""The kida environment an app renders with.

Built once when the app freezes. Templates are searched in
``template_dir`` first, then in each of ``component_dirs``. Every
environment carries wren's filters and the ``trigger_*_attrs``
globals; app-registered ones are layered on top and win on a name
clash.
"""

from collections.abc import Callable
from typing import Any

from kida import ChoiceLoader, Environment, FileSystemLoader

from wren.config import AppConfig
from wren.templating.filters import BUILTIN_FILTERS, BUILTIN_GLOBALS


def create_environment(
    config: AppConfig,
    filters: dict[str, Callable[..., Any]],
    globals_: dict[str, Any],
) -> Environment:
    search_path = [config.template_dir, *config.component_dirs]
    env = Environment(
        loader=ChoiceLoader([FileSystemLoader(str(path)) for path in search_path]),
        autoescape=config.autoescape,
        auto_reload=config.debug,
        trim_blocks=config.trim_blocks,
        lstrip_blocks=config.lstrip_blocks,
    )
    env.update_filters({**BUILTIN_FILTERS, **filters})
    for name, value in {**BUILTIN_GLOBALS, **globals_}.items():
        env.add_global(name, value)
    return env


def render(env: Environment, name: str, context: dict[str, Any], *, block: str | None = None) -> str:
    """Render template *name*, or only its *block* when one is given."""
    template = env.get_template(name)
    if block is None:
        return template.render(context)
    return template.render_block(block, context)
