"""
HTML page assembly.

Every graph renders to one standalone ``<svg>`` string; a page lays several of
them out side by side in a CSS grid. Clicking an SVG pauses or resumes its SMIL
timeline.

Public entry points:
- render_page(title, graphs) -> str
- write_pages(pages, directory) -> list[Path]
"""
from __future__ import annotations

import re
from html import escape
from pathlib import Path

_HEAD = """<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8" />
    <meta http-equiv="pragma" content="no-cache">
    <meta http-equiv="expires" content="0">
    <meta http-equiv="cache-control" content="no-cache, must-revalidate">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>graphanim - {title}</title>
    <style>
        html,
        body {{
            margin: 0;
            padding: 0;
        }}
        nav {{
            font-family: sans-serif;
            padding: 4px 8px;
        }}
        nav a {{
            margin-right: 12px;
        }}
        .grid {{
            display: grid;
            grid-template-columns: repeat({columns}, 1fr);
        }}
        .cell {{
            border: 1px solid #000000;
        }}
        .svg_graphanim {{
            position: relative;
            width: 100%;
            height: {height};
        }}
    </style>
    <script>
        function pause(svg) {{
            if (svg.animationsPaused()) {{
                svg.unpauseAnimations();
            }} else {{
                svg.pauseAnimations();
            }}
        }}
    </script>
  </head>
  <body>
"""

_TAIL = """  </body>
</html>
"""


def _svg(graph) -> str:
    # accept a Graph or an already rendered SVG string
    return graph if isinstance(graph, str) else graph.render()


def render_page(title: str, graphs, nav: str = "") -> str:
    """
    Build one HTML page showing the animation of each graph side by side.

    Parameters
    ----------
    title : str
        Page title (escaped).
    graphs : Graph | str | Iterable[Graph | str]
        Graphs (rendered with :meth:`Graph.render`) or SVG strings, one grid
        column each. Their outputs are independent and concatenated in order.
    nav : str, optional
        Raw HTML inserted above the grid (used by :func:`write_pages`).

    Returns
    -------
    str
    """
    if isinstance(graphs, str) or hasattr(graphs, "render"):
        graphs = [graphs]
    svgs = [_svg(g) for g in graphs]
    columns = max(1, len(svgs))
    height = "100vh" if not nav else "calc(100vh - 32px)"

    out = [_HEAD.format(title=escape(title), columns=columns, height=height)]
    if nav:
        out.append(nav)
    out.append('    <div class="grid">\n')
    for svg in svgs:
        out.append('      <div class="cell">')
        out.append(svg)
        out.append("      </div>\n")
    out.append("    </div>\n")
    out.append(_TAIL)
    return "".join(out)


def _slug(title: str) -> str:
    slug = re.sub(r"[^0-9A-Za-z]+", "_", title).strip("_").lower()
    return slug or "page"


def write_pages(pages, directory) -> list:
    """
    Write one HTML file per page, each with a navigation menu linking them all.

    Parameters
    ----------
    pages : Iterable[tuple[str, Graph | str | Iterable[Graph | str]]]
        ``(title, graphs)`` pairs; see :func:`render_page`.
    directory : str | Path
        Output directory (created if missing).

    Returns
    -------
    list[pathlib.Path]
        Written files, in page order. File names are slugs of the titles
        (``"DFS traversal"`` -> ``dfs_traversal.html``), deduplicated with a
        numeric suffix.
    """
    pages = list(pages)
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)

    names = []
    for title, _ in pages:
        base = _slug(title)
        name, k = f"{base}.html", 1
        while name in names:
            k += 1
            name = f"{base}_{k}.html"
        names.append(name)

    menu = "".join(
        f'<a href="{name}">{escape(title)}</a>' for name, (title, _) in zip(names, pages)
    )
    nav = f"    <nav>{menu}</nav>\n"

    written = []
    for name, (title, graphs) in zip(names, pages):
        path = directory / name
        path.write_text(render_page(title, graphs, nav=nav), encoding="utf-8")
        written.append(path)
    return written
