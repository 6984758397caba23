from __future__ import annotations

from pathlib import Path
import xml.etree.ElementTree as ET

from luvatrix_scatter.primitives import Circle, Line, PlotDocument, Primitive, Rect, Text

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


def to_svg_markup(document: PlotDocument) -> str:
    root = ET.Element(
        "svg",
        {
            "xmlns": SVG_NAMESPACE,
            "width": _fmt(document.width),
            "height": _fmt(document.height),
            "viewBox": f"0 0 {_fmt(document.width)} {_fmt(document.height)}",
        },
    )
    for primitive in document.primitives:
        root.append(_element(primitive))
    return ET.tostring(root, encoding="unicode")


def write_svg(document: PlotDocument, path: str | Path) -> Path:
    out = Path(path)
    out.write_text(to_svg_markup(document) + "\n", encoding="utf-8")
    return out


def _element(primitive: Primitive) -> ET.Element:
    if isinstance(primitive, Rect):
        attrs = {
            "x": _fmt(primitive.x),
            "y": _fmt(primitive.y),
            "width": _fmt(primitive.width),
            "height": _fmt(primitive.height),
            **_paint(primitive.fill, primitive.stroke, primitive.stroke_width),
        }
        if primitive.id:
            attrs = {"id": primitive.id, **attrs}
        return ET.Element("rect", attrs)
    if isinstance(primitive, Line):
        attrs = {
            "x1": _fmt(primitive.x1),
            "y1": _fmt(primitive.y1),
            "x2": _fmt(primitive.x2),
            "y2": _fmt(primitive.y2),
            "stroke": primitive.stroke or "none",
            "stroke-width": _fmt(primitive.stroke_width),
        }
        if primitive.dash:
            attrs["stroke-dasharray"] = " ".join(_fmt(v) for v in primitive.dash)
        return ET.Element("line", attrs)
    if isinstance(primitive, Circle):
        return ET.Element(
            "circle",
            {
                "cx": _fmt(primitive.cx),
                "cy": _fmt(primitive.cy),
                "r": _fmt(primitive.r),
                **_paint(primitive.fill, primitive.stroke, primitive.stroke_width),
            },
        )
    if isinstance(primitive, Text):
        attrs = {
            "x": _fmt(primitive.x),
            "y": _fmt(primitive.y),
            "font-family": primitive.font_family,
            "font-size": _fmt(primitive.font_size),
            "text-anchor": primitive.anchor,
            "fill": primitive.fill,
        }
        if primitive.rotate:
            attrs["transform"] = (
                f"rotate({_fmt(primitive.rotate)} {_fmt(primitive.x)} {_fmt(primitive.y)})"
            )
        elem = ET.Element("text", attrs)
        elem.text = primitive.text
        return elem
    raise TypeError(f"unsupported primitive: {type(primitive)!r}")


def _paint(fill: str | None, stroke: str | None, stroke_width: float) -> dict[str, str]:
    return {
        "fill": fill or "none",
        "stroke": stroke or "none",
        "stroke-width": _fmt(stroke_width),
    }


def _fmt(value: float) -> str:
    out = f"{float(value):.4f}".rstrip("0").rstrip(".")
    if out == "-0":
        out = "0"
    return out
