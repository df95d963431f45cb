"""Generate a self-contained HTML report of a computed treemap.

The layout is computed in Python; the page only paints the precomputed boxes
as SVG rectangles and handles hover and click. Hovering a box shows its path
and size, whitens it and outlines the directory region it sits in; clicking
copies the path to the clipboard. No external assets are needed.
"""

import html
import json
from collections.abc import Sequence
from pathlib import Path

import humanize

from ..coloring import color
from ..layout.models import FileBox
from ..scanning.models import Node


def generate_report(
    root: Node,
    boxes: Sequence[FileBox],
    output_path: str = "bellavista-report.html",
    width: float = 600.0,
    height: float = 400.0,
    title: str = "Bellavista",
) -> str:
    """Write the treemap report and return its absolute path.

    Parameters
    ----------
    root:
        The scanned tree (used for the header summary).
    boxes:
        Layout output for ``root`` computed in a ``width`` x ``height`` area.
    output_path:
        Where to write the HTML file.
    title:
        Page and header title.
    """
    data_json = json.dumps(
        {
            "boxes": [_box_record(i, b) for i, b in enumerate(boxes)],
            "summary": {
                "root": root.path,
                "total": humanize.naturalsize(root.size, binary=True),
                "files": len(boxes),
            },
        }
    )

    svg = _build_svg(boxes, width, height)
    page = _build_html(html.escape(title), svg, data_json)

    out = Path(output_path).resolve()
    out.write_text(page, encoding="utf-8")
    return str(out)


# ── Private helpers ──────────────────────────────────────────────────


def _box_record(index: int, box: FileBox) -> dict:
    parent = box.parent.as_tuple() if box.parent is not None else None
    return {
        "id": index,
        "path": box.path,
        "size": box.size,
        "label": humanize.naturalsize(box.size, binary=True),
        "parent": parent,
    }


def _build_svg(boxes: Sequence[FileBox], width: float, height: float) -> str:
    rects = []
    for i, box in enumerate(boxes):
        r = box.rect
        if r.area <= 0:
            continue
        rects.append(
            f'<rect data-id="{i}" x="{r.x0:.3f}" y="{r.y0:.3f}" '
            f'width="{r.width:.3f}" height="{r.height:.3f}" fill="{color(box.path).hex}"/>'
        )
    return (
        f'<svg id="treemap" xmlns="http://www.w3.org/2000/svg" '
        f'width="{width:.0f}" height="{height:.0f}" viewBox="0 0 {width:.3f} {height:.3f}">'
        f'<rect x="0" y="0" width="{width:.3f}" height="{height:.3f}" fill="#ff00ff"/>'
        + "".join(rects)
        + '<rect id="parent-outline" fill="none" stroke="#ffffff" stroke-width="2" '
        'visibility="hidden"/></svg>'
    )


def _build_html(title: str, svg: str, data_json: str) -> str:
    # The f-string uses {{ / }} to produce literal braces in the CSS and JS.
    # "</" is escaped so a path can never close the script element.
    data_json = data_json.replace("</", "<\\/")
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
<style>
* {{ margin: 0; padding: 0; box-sizing: border-box; }}
body {{ font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif; background: #0d1117; color: #c9d1d9; }}
#header {{ padding: 16px 24px; border-bottom: 1px solid #21262d; }}
#header h1 {{ font-size: 20px; color: #58a6ff; margin-bottom: 4px; }}
#summary {{ font-size: 13px; color: #8b949e; }}
#canvas {{ padding: 16px 24px; }}
#treemap rect[data-id] {{ cursor: pointer; }}
#status {{ display: flex; padding: 8px 24px; font-size: 14px; border-top: 1px solid #21262d; }}
#status .hint {{ flex: 1; }}
#status .copied {{ color: #3fb950; }}
</style>
</head>
<body>
<div id="header">
  <h1>{title}</h1>
  <div id="summary"></div>
</div>
<div id="canvas">{svg}</div>
<div id="status"><span class="hint" id="hover-label">Hover over an element to see its path and size</span><span class="copied" id="copied"></span></div>
<script>
const DATA = {data_json};

(function() {{
  var s = DATA.summary;
  document.getElementById("summary").textContent = s.root + ": " + s.total + " in " + s.files + " files";
}})();

(function() {{
  var svg = document.getElementById("treemap");
  var outline = document.getElementById("parent-outline");
  var label = document.getElementById("hover-label");
  var copied = document.getElementById("copied");
  var active = null;

  function clear() {{
    if (active) {{
      active.el.setAttribute("fill", active.fill);
      active = null;
    }}
    outline.setAttribute("visibility", "hidden");
  }}

  svg.addEventListener("mousemove", function(e) {{
    var el = e.target;
    if (!el.hasAttribute || !el.hasAttribute("data-id")) return;
    if (active && active.el === el) return;
    clear();
    var box = DATA.boxes[+el.getAttribute("data-id")];
    active = {{ el: el, fill: el.getAttribute("fill"), box: box }};
    el.setAttribute("fill", "#ffffff");
    if (box.parent) {{
      outline.setAttribute("x", box.parent[0]);
      outline.setAttribute("y", box.parent[1]);
      outline.setAttribute("width", box.parent[2] - box.parent[0]);
      outline.setAttribute("height", box.parent[3] - box.parent[1]);
      outline.setAttribute("visibility", "visible");
    }}
    label.textContent = box.path + " (" + box.label + ")";
  }});

  svg.addEventListener("mouseleave", clear);

  svg.addEventListener("click", function() {{
    if (!active || !navigator.clipboard) return;
    navigator.clipboard.writeText(active.box.path).then(function() {{
      copied.textContent = "Copied path to clipboard";
      setTimeout(function() {{ copied.textContent = ""; }}, 1500);
    }});
  }});
}})();
</script>
</body>
</html>
"""
