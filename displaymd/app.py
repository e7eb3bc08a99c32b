"""displaymd: browse a directory of markdown files in the browser."""

from pathlib import Path

from flask import Flask, abort, current_app, redirect, render_template, url_for

from displaymd.config import Settings
from displaymd.indexer import first_entry, scan
from displaymd.page import assemble_page
from displaymd.paths import PathNotFound, resolve
from displaymd.sidebar import build_sidebar

SETTINGS_KEY = "DISPLAYMD_SETTINGS"


def read_markdown(path: Path) -> str:
    """Return the exact text of a resolved file, or raise PathNotFound."""
    if not path.is_file():
        raise PathNotFound(str(path))
    try:
        return path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError):
        raise PathNotFound(str(path)) from None


def create_app(settings: Settings) -> Flask:
    """Build the Flask app serving ``settings.root``."""
    app = Flask(__name__)
    app.config[SETTINGS_KEY] = settings
    with app.open_resource("static/style.css", "r") as f:
        stylesheet = f.read()

    @app.context_processor
    def inject_stylesheet():
        return {"stylesheet": stylesheet}

    # ── Routes ────────────────────────────────────────────────────────

    @app.route("/")
    def index():
        """Redirect to the home file, else the first file in the index."""
        settings = current_app.config[SETTINGS_KEY]
        files = scan(settings.root)
        target = settings.home if settings.home in files else first_entry(files)
        if target is None:
            return render_template("empty.html", root=settings.root)
        return redirect(url_for("view", path=target))

    @app.route("/view/<path:path>")
    def view(path):
        """Show one file's raw content next to the sidebar."""
        settings = current_app.config[SETTINGS_KEY]
        try:
            resolved = resolve(settings.root, path)
            content = read_markdown(resolved)
        except PathNotFound:
            current_app.logger.info("not found: %r", path)
            abort(404)
        current = resolved.relative_to(settings.root).as_posix()
        sidebar = build_sidebar(scan(settings.root), current)
        page = assemble_page(path, content, sidebar)
        return render_template("view.html", page=page)

    @app.route("/favicon.ico")
    def favicon():
        return "", 204

    @app.errorhandler(404)
    def not_found(error):
        return render_template("not_found.html"), 404

    return app
