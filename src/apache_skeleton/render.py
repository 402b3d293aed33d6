"""Template rendering - one function per generated file.

Every function takes immutable values and returns text, so file content
can be checked without touching the filesystem.
"""

import os
from functools import lru_cache

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from apache_skeleton.config import Settings
from apache_skeleton.model.project import AuditRecord, ProjectSpec, ProjectType
from apache_skeleton.model.runtime import RuntimeMode

TEMPLATE_DIR = os.path.join(os.path.dirname(__file__), "templates")

# Listed on the generated landing page
ASSET_LINKS = [
    ("Header", "/includes/header.php"),
    ("Footer", "/includes/footer.php"),
    ("CSS", "/public/assets/css/style.css"),
    ("JS", "/public/assets/js/app.js"),
]


@lru_cache(maxsize=None)
def _environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(TEMPLATE_DIR),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )


def _render(name: str, **context: object) -> str:
    return _environment().get_template(name).render(**context)


def render_stylesheet() -> str:
    return _render("style.css.j2")


def render_script() -> str:
    return _render("app.js.j2")


def render_header(settings: Settings) -> str:
    """includes/header.php: page title/description convention plus Bootstrap CSS."""
    return _render("header.php.j2", bootstrap_css=settings.bootstrap_css)


def render_footer(settings: Settings) -> str:
    return _render("footer.php.j2", bootstrap_js=settings.bootstrap_js)


def render_index_php() -> str:
    return _render("index.php.j2", assets=ASSET_LINKS)


def render_index_html(spec: ProjectSpec, settings: Settings) -> str:
    """Static landing page for marketing sites. Contains no PHP."""
    return _render("index.html.j2", domain=spec.domain, bootstrap_css=settings.bootstrap_css)


def render_htaccess(entry_point: str) -> str:
    return _render("htaccess.j2", entry_point=entry_point)


def render_vhost(spec: ProjectSpec, mode: RuntimeMode) -> str:
    """Apache VirtualHost template for the project.

    DocumentRoot is always the public/ directory. In FPM mode a
    ProxyFCGI handler bound to the detected socket is embedded;
    otherwise only an explanatory comment is.
    """
    return _render(
        "vhost.conf.j2",
        domain=spec.domain,
        public_dir=spec.public_dir.as_posix(),
        socket_path=mode.socket_path if mode.is_fpm else None,
        static_site=spec.project_type == ProjectType.MARKETING,
    )


def render_versions(record: AuditRecord) -> str:
    return _render("versions.txt.j2", record=record)


def render_next_steps(spec: ProjectSpec, mode: RuntimeMode) -> str:
    return _render(
        "next_steps.txt.j2",
        domain=spec.domain,
        vhost_path=spec.vhost_path.as_posix(),
        socket_path=mode.socket_path if mode.is_fpm else None,
    )
