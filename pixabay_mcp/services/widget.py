"""
Services - Gallery Widget

Inlines the built widget bundle into a single HTML document.
"""

from pathlib import Path
from typing import Optional

from pixabay_mcp.services.errors import MissingPresentationAsset

SCRIPT_FILENAME = "component.js"
STYLE_FILENAME = "component.css"

WIDGET_TEMPLATE = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Pixabay Image Gallery</title>
    {style}
  </head>
  <body>
    <div id="pixabay-gallery-root"></div>
    <script type="module">
{script}
    </script>
  </body>
</html>"""


def _read_optional(path: Path) -> Optional[str]:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None


def _read_required(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise MissingPresentationAsset(
            f"Missing build artifact at {path}. Build the widget bundle before "
            "starting the server."
        ) from e


def load_widget_html(dist_dir: Path) -> str:
    """
    Build the widget document from ``dist_dir``.

    Args:
        dist_dir: Directory holding component.js and optionally component.css

    Returns:
        HTML document text

    Raises:
        MissingPresentationAsset: component.js is missing
    """
    dist_dir = Path(dist_dir)
    script = _read_required(dist_dir / SCRIPT_FILENAME)
    style = _read_optional(dist_dir / STYLE_FILENAME)
    return WIDGET_TEMPLATE.format(
        style=f"<style>{style}</style>" if style else "",
        script=script,
    )
