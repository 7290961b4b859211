"""Application configuration.

AppConfig is a frozen dataclass: immutable after creation and IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(debug=True, port=3000, template_dir="templates")
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False

    # Templates
    template_dir: str | Path = "templates"
    component_dirs: tuple[str | Path, ...] = ()  # Partials shared between apps
    autoescape: bool = True
    trim_blocks: bool = True
    lstrip_blocks: bool = True

    # Frame controls: inject the trigger relay / query encoder snippet
    # into full pages so [data-trigger-group] containers come alive.
    frame_controls: bool = True

    # Logging
    log_level: str = "info"

    # Limits
    max_content_length: int = 1024 * 1024  # 1 MB of urlencoded form data
