"""SVG/SMIL encoding of element markup and animation primitives."""
from __future__ import annotations

from html import escape
from typing import NamedTuple

from .elements import LinkVisual, NodeVisual, Tag
from .geometry import Point

SVG_NS = "http://www.w3.org/2000/svg"
DEFAULT_BOUNDS = (-500, 500, -500, 500)


class Primitive(NamedTuple):
    """
    One time-coded animation instruction.

    ``kind`` is one of ``motion``, ``path``, ``fade_in``, ``fade_out``,
    ``fill``, ``stroke``, ``stroke_width``, ``label_fill``, ``viewbox``.
    ``element`` is the SVG id of the owning element (empty for ``viewbox``),
    ``target`` the SVG id the animation applies to, ``name`` the public name
    of the element (``"A"``, ``"A-B"``, ``"A>B"``).
    """
    batch: int
    kind: str
    name: str
    element: str
    target: str
    attribute: str
    begin: int
    dur: int
    start: str
    end: str


def _d(a: Point, b: Point) -> str:
    return f"M{a.x} {a.y} L{b.x} {b.y}"


def _offset(dx_dy) -> str:
    return f"{dx_dy[0]} {dx_dy[1]}"


def link_name(link: LinkVisual) -> str:
    return f"{link.from_name}{'-' if link.bidirectional else '>'}{link.to_name}"


class SvgEncoder:
    """
    Turns visual elements into SVG markup and their snapshot diffs into
    :class:`Primitive` records.

    Parameters
    ----------
    params : RenderParams
        Read at encoding time (radius, label display, deleted color).
    """

    def __init__(self, params):
        self.params = params

    # Instantiation

    def instantiate_node(self, node: NodeVisual) -> str:
        s = node.initial
        uid = node.uid
        out = [
            f'<g id="n{uid}" opacity="0">\n',
            f'  <circle id="nc{uid}" cx="{s.center.x}" cy="{s.center.y}" r="{self.params.radius_node}" ',
            f'fill="{s.fill.svg()}" stroke="{s.stroke_drawn().svg()}" stroke-width="{s.width_drawn()}"></circle>\n',
        ]
        if self.params.display_node_label:
            node.labelled = True
            out.append(
                f'  <text id="nt{uid}" x="{s.center.x}" y="{s.center.y}" text-anchor="middle" '
                f'dominant-baseline="central" fill="{s.text.svg()}">{escape(node.name)}</text>\n'
            )
        out.append("</g>\n")
        return "".join(out)

    def instantiate_link(self, link: LinkVisual) -> str:
        s = link.initial
        uid = link.uid
        out = [
            f'<path id="l{uid}" d="{_d(s.from_center, s.to_center)}" fill="none" opacity="0" '
            f'stroke="{s.stroke_drawn().svg()}" stroke-width="{s.width_drawn()}" />\n'
        ]
        if self.params.display_link_value and link.value != 0:
            link.labelled = True
            mid = s.midpoint()
            out.append(f'<g id="lv{uid}" opacity="0">\n')
            out.append(
                f'  <text id="lt{uid}" x="{mid.x}" y="{mid.y}" text-anchor="middle" '
                f'fill="{s.text.svg()}">{link.value}</text>\n'
            )
            out.append("</g>\n")
        if not link.bidirectional:
            up = (s.from_center.x > s.to_center.x) == (s.from_center.y > s.to_center.y)
            dx = 5 if up else -5
            out.append(
                f'<text id="la{uid}" fill="{s.text.svg()}" opacity="0" dx="{dx}" dy="-5">'
                f'<textPath startOffset="{self.params.radius_node + 10}" href="#l{uid}">⇒</textPath></text>\n'
            )
        return "".join(out)

    # View frame

    def viewbox(self, bounds) -> str:
        x_min, x_max, y_min, y_max = bounds
        margin = 2 * self.params.radius_node
        return f"{x_min - margin} {y_min - margin} {x_max - x_min + 2 * margin} {y_max - y_min + 2 * margin}"

    def header(self, bounds) -> str:
        return (
            f'\n<svg xmlns="{SVG_NS}" class="svg_graphanim" onclick="pause(this)" '
            f'viewBox="{self.viewbox(bounds)}" preserveAspectRatio="xMidYMid meet">\n'
        )

    def viewbox_primitives(self, before, after, batch, begin, dur) -> list:
        if before == after:
            return []
        return [Primitive(batch, "viewbox", "", "", "", "viewBox", begin, dur,
                          self.viewbox(before), self.viewbox(after))]

    # Diffs

    def node_primitives(self, node: NodeVisual, batch: int, begin: int, dur: int) -> list:
        init, prev, cur = node.initial, node.previous, node.current
        uid = node.uid

        def prim(kind, target, attribute, start, end):
            return Primitive(batch, kind, node.name, f"n{uid}", target, attribute, begin, dur, start, end)

        out = []
        if prev.center != cur.center:
            out.append(prim("motion", f"n{uid}", "",
                            _offset(prev.center.delta(init.center)), _offset(cur.center.delta(prev.center))))
        if cur.tag is Tag.CREATED:
            out.append(prim("fade_in", f"n{uid}", "opacity", "0", "1"))
        elif cur.tag is Tag.DELETED:
            out.append(prim("fade_out", f"n{uid}", "opacity", "1", "0"))
        if node.labelled and prev.text != cur.text:
            out.append(prim("label_fill", f"nt{uid}", "fill", prev.text.svg(), cur.text.svg()))
        if prev.width_drawn() != cur.width_drawn():
            out.append(prim("stroke_width", f"nc{uid}", "stroke-width",
                            str(prev.width_drawn()), str(cur.width_drawn())))
        stroke_to = self.params.color_tag_deleted if cur.tag is Tag.DELETED else cur.stroke_drawn()
        if prev.stroke_drawn() != stroke_to:
            out.append(prim("stroke", f"nc{uid}", "stroke", prev.stroke_drawn().svg(), stroke_to.svg()))
        if prev.fill != cur.fill:
            out.append(prim("fill", f"nc{uid}", "fill", prev.fill.svg(), cur.fill.svg()))
        return out

    def link_primitives(self, link: LinkVisual, batch: int, begin: int, dur: int) -> list:
        init, prev, cur = link.initial, link.previous, link.current
        uid = link.uid
        name = link_name(link)

        def prim(kind, target, attribute, start, end):
            return Primitive(batch, kind, name, f"l{uid}", target, attribute, begin, dur, start, end)

        out = []
        if prev.from_center != cur.from_center or prev.to_center != cur.to_center:
            out.append(prim("path", f"l{uid}", "d",
                            _d(prev.from_center, prev.to_center), _d(cur.from_center, cur.to_center)))
            if link.labelled:
                out.append(prim("motion", f"lv{uid}", "",
                                _offset(prev.midpoint().delta(init.midpoint())),
                                _offset(cur.midpoint().delta(prev.midpoint()))))
        if cur.tag in (Tag.CREATED, Tag.DELETED):
            kind, start, end = ("fade_in", "0", "1") if cur.tag is Tag.CREATED else ("fade_out", "1", "0")
            targets = [f"l{uid}"]
            if link.labelled:
                targets.append(f"lv{uid}")
            if not link.bidirectional:
                targets.append(f"la{uid}")
            out.extend(prim(kind, t, "opacity", start, end) for t in targets)
        if link.labelled and prev.text != cur.text:
            out.append(prim("label_fill", f"lt{uid}", "fill", prev.text.svg(), cur.text.svg()))
        if prev.width_drawn() != cur.width_drawn():
            out.append(prim("stroke_width", f"l{uid}", "stroke-width",
                            str(prev.width_drawn()), str(cur.width_drawn())))
        stroke_to = self.params.color_tag_deleted if cur.tag is Tag.DELETED else cur.stroke_drawn()
        if prev.stroke_drawn() != stroke_to:
            out.append(prim("stroke", f"l{uid}", "stroke", prev.stroke_drawn().svg(), stroke_to.svg()))
        return out

    # Markup

    @staticmethod
    def markup(p: Primitive) -> str:
        timing = f'begin="{p.begin}ms" dur="{p.dur}ms" fill="freeze"'
        if p.kind == "motion":
            return f'<animateMotion href="#{p.target}" {timing} path="m {p.start} l {p.end}" />\n'
        if p.kind == "path":
            return f'<animate href="#{p.target}" attributeName="d" values="{p.start};{p.end}" {timing} />\n'
        if p.kind == "viewbox":
            return f'<animate attributeName="viewBox" from="{p.start}" to="{p.end}" {timing} />\n'
        return f'<animate href="#{p.target}" attributeName="{p.attribute}" from="{p.start}" to="{p.end}" {timing} />\n'
