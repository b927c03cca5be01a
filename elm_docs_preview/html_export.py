"""Rendering of the static index.html that boots the compiled Elm app."""

from __future__ import annotations

from pathlib import Path


def render_index_html(docs_json: str) -> str:
    """Render the page shell with the documentation JSON inlined verbatim.

    The payload is not escaped. Callers own the guarantee that it is safe to
    place inside a script block.
    """
    return f"""<!DOCTYPE HTML>
<html>
  <head>
    <title>Docs</title>
    <script src="app.js"></script>
    <script src="docs.js"></script>
  </head>

  <body>
    <script type="text/javascript">
      Elm.Main.fullscreen({{
        docsJson: {docs_json}
      }})
    </script>
  </body>
</html>
"""


def write_index_html(output_dir: Path, docs_json: str) -> Path:
    """Write <output_dir>/index.html and return its path."""
    index_path = output_dir / "index.html"
    index_path.write_text(render_index_html(docs_json), encoding="utf-8", newline="")
    return index_path
