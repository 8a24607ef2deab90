"""HTML rendering for directory index pages.

Pages are rendered from the jinja2 template ``templates/index.html.in``.
Rendering is pure: it only reads the packaged template and assets.
"""

import base64
from functools import lru_cache
from pathlib import Path, PurePosixPath
from typing import NamedTuple
from urllib.parse import quote

from jinja2 import Environment, FileSystemLoader
from markupsafe import Markup

PACKAGE_DIR = Path(__file__).resolve().parent
TEMPLATE_DIR = PACKAGE_DIR / "templates"
ASSET_DIR = PACKAGE_DIR / "assets"
TEMPLATE_FILE = "index.html.in"
STYLE_FILE = ASSET_DIR / "style.css"
LOGO_FILE = ASSET_DIR / "logo.svg"

DIR_GLYPH = "\U0001F4C1"
FILE_GLYPH = "\U0001F4C4"
COLUMNS = ("Type", "Name", "Last modified", "Size")


class Breadcrumb(NamedTuple):
    href: str
    label: str


@lru_cache(maxsize=1)
def _environment():
    return Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=True,
        keep_trailing_newline=True,
    )


@lru_cache(maxsize=1)
def stylesheet():
    return Markup(STYLE_FILE.read_text(encoding="utf-8"))


@lru_cache(maxsize=1)
def favicon_data_uri():
    encoded = base64.b64encode(LOGO_FILE.read_bytes()).decode("ascii")
    return f"data:image/svg+xml;base64,{encoded}"


def join_url(base_url: str, rel: PurePosixPath, trailing_slash: bool = False) -> str:
    """Join ``rel`` onto the base URL, quoting each path segment"""
    href = base_url.rstrip("/") + "/" + quote(rel.as_posix())
    if trailing_slash and not href.endswith("/"):
        href += "/"
    return href


def breadcrumbs(current_rel: PurePosixPath, base_url: str) -> list[Breadcrumb]:
    """Navigation trail from the mirror root down to ``current_rel``.

    The first crumb always points at the base URL and reads ``/``; every
    following crumb is one more level of ``current_rel``, ending with the
    current directory itself.
    """
    crumbs = [Breadcrumb(base_url, "/")]
    parts = [p for p in current_rel.parts if p not in ("", ".")]
    for depth in range(1, len(parts) + 1):
        ancestor = PurePosixPath(*parts[:depth])
        crumbs.append(
            Breadcrumb(join_url(base_url, ancestor, trailing_slash=True), ancestor.name or "/")
        )
    return crumbs


def entry_href(entry, base_url: str) -> str:
    return join_url(base_url, entry.rel, trailing_slash=entry.is_dir)


def render_page(entries, current_rel, config) -> str:
    """Render the index page for one directory.

    Args:
        entries: Sorted DirectoryEntry sequence to list
        current_rel: Directory being rendered, relative to the mirror root
        config: BuildConfig supplying title and base URL

    Returns:
        The complete HTML document
    """
    rows = [
        {
            "glyph": DIR_GLYPH if entry.is_dir else FILE_GLYPH,
            "kind": "dir" if entry.is_dir else "file",
            "href": entry_href(entry, config.base_url),
            "name": entry.name,
            "modified": entry.modified_display,
            "size": entry.size_display,
        }
        for entry in entries
    ]
    crumbs = breadcrumbs(PurePosixPath(current_rel), config.base_url)
    template = _environment().get_template(TEMPLATE_FILE)
    return template.render(
        PAGE_TITLE=config.title,
        STYLE=stylesheet(),
        FAVICON=favicon_data_uri(),
        ROOT=crumbs[0],
        CRUMBS=crumbs[1:],
        COLUMNS=COLUMNS,
        ROWS=rows,
    )
