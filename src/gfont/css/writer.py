"""CSS serializers for font-face records.

Two families of output are produced, each in a compact and a pretty
(human-readable) layout:

- Per-record: one @font-face rule per FontFace, exactly as parsed.
- Consolidated: one @font-face rule per (family, weight, style) triple whose
  src lists every available format in legacy-compatible priority order,
  including the ``?#iefix`` fallback for Internet Explorer's EOT handling.
"""

import re

from gfont.config import RenderConfig
from gfont.domain import FontFace, FontFaceCollection

# src entry order inside a consolidated rule; eot is handled separately
FORMAT_PRIORITY: tuple[str, ...] = ("eot", "woff2", "woff", "ttf", "svg")

# Unescaped CSS identifier (non-ASCII letters allowed)
_IDENT = re.compile(r"-?[A-Za-z_\u0080-\U0010ffff][A-Za-z0-9_\-\u0080-\U0010ffff]*")


def _family_value(family: str) -> str:
    """Quote a family name unless it is a single CSS identifier."""
    if _IDENT.fullmatch(family):
        return family
    if "'" in family:
        return f'"{family}"'
    return f"'{family}'"


def _require_url(face: FontFace) -> str:
    if not face.url:
        raise ValueError(f"Font face '{face}' has no source URL")
    return face.url


def face_css(face: FontFace, pretty: bool = False) -> str:
    """Serialize a single font face as an @font-face rule.

    Args:
        face: Font face to serialize
        pretty: Emit one declaration per line instead of the compact form

    Returns:
        CSS text of one @font-face rule (no trailing newline)

    Raises:
        ValueError: If the font face has no source URL
    """
    url = _require_url(face)
    separator = ": " if pretty else ":"

    # Empty family and style are omitted
    declarations = []
    if face.family:
        declarations.append(("font-family", _family_value(face.family)))
    if face.style:
        declarations.append(("font-style", face.style))
    declarations.append(("font-weight", str(face.weight)))
    declarations.append(("src", f"url('{url}') format('{face.format}')"))
    if face.unicode_range:
        range_separator = ", " if pretty else ","
        declarations.append(("unicode-range", range_separator.join(face.unicode_range)))

    if pretty:
        lines = ["@font-face {"]
        lines.extend(f"\t{name}{separator}{value};" for name, value in declarations)
        lines.append("}")
        return "\n".join(lines)

    body = "".join(f"{name}{separator}{value};" for name, value in declarations)
    return "@font-face{" + body + "}"


def collection_css(faces: FontFaceCollection, pretty: bool = False) -> str:
    """Serialize every font face of a collection as its own rule.

    Args:
        faces: Collection to serialize
        pretty: Use the human-readable layout

    Returns:
        Concatenated rules, newline-separated in pretty mode
    """
    separator = "\n" if pretty else ""
    return separator.join(face_css(face, pretty=pretty) for face in faces)


def _select_formats(
    faces: FontFaceCollection, family: str, style: str, weight: int
) -> dict[str, FontFace]:
    """Pick the first record per format for one (family, style, weight) triple."""
    selected: dict[str, FontFace] = {}
    for format_name in faces.formats():
        matches = faces.select(format=format_name, family=family, style=style, weight=weight)
        if len(matches) > 0:
            selected[format_name] = matches[0]
    return selected


def _consolidated_rule(
    family: str, style: str, weight: int, selected: dict[str, FontFace], pretty: bool
) -> str:
    if pretty:
        rule = (
            "@font-face {\n"
            f"\tfont-family: {_family_value(family)};\n"
            f"\tfont-style: {style};\n"
            f"\tfont-weight: {weight};"
        )
        src_open = "\n\tsrc: "
        entry_sep = ",\n\t\t"
    else:
        rule = (
            "@font-face{"
            f"font-family:{_family_value(family)};"
            f"font-style:{style};"
            f"font-weight:{weight};"
        )
        src_open = "src:"
        entry_sep = ","

    if "eot" in selected:
        eot_url = _require_url(selected["eot"])
        rule += f"{src_open}url('{eot_url}');"
        rule += f"{src_open}url('{eot_url}?#iefix') format('embedded-opentype')"
        rule += ";" if len(selected) == 1 else entry_sep
    else:
        rule += src_open

    for format_name in FORMAT_PRIORITY[1:]:
        if format_name in selected:
            url = _require_url(selected[format_name])
            rule += f"url('{url}') format('{format_name}'){entry_sep}"

    rule = rule.strip()
    rule = rule.removesuffix(",")
    if pretty:
        if not rule.endswith(";"):
            rule += ";"
        return rule + "\n}"

    rule = rule.removesuffix(";")
    return rule + "}"


def consolidated_css(faces: FontFaceCollection, pretty: bool = False) -> str:
    """Serialize a collection as one rule per (family, weight, style) triple.

    Triples are visited family first, then weight, then style, each in
    first-seen order. Within a rule the src entries follow the fixed format
    priority eot, woff2, woff, ttf, svg; the first record seen for each
    format wins. A triple with no matching record still produces a rule with
    an empty src.

    Args:
        faces: Collection to serialize
        pretty: Use the human-readable layout

    Returns:
        CSS text; pretty output ends with a newline
    """
    rules = []
    for family in faces.families():
        for weight in faces.weights():
            for style in faces.styles():
                selected = _select_formats(faces, family, style, weight)
                rules.append(_consolidated_rule(family, style, weight, selected, pretty))

    if pretty:
        return "\n".join(rules) + "\n"
    return "".join(rules)


def render_css(faces: FontFaceCollection, config: RenderConfig | None = None) -> str:
    """Render a collection according to the render settings.

    Args:
        faces: Collection to serialize
        config: Render settings (compact per-record output when None)

    Returns:
        CSS text
    """
    if config is None:
        config = RenderConfig()

    if config.compat:
        return consolidated_css(faces, pretty=config.pretty)
    return collection_css(faces, pretty=config.pretty)
