"""Parsing of style codes embedded in image reference filenames.

Encoded references look like ``EA-001_2_AS3_VD4_MP5.jpg``: category prefix,
quad sequence, image position, then Architectural Style (AS), a secondary
descriptor (VD) and Mood/Palette (MP), each a digit from 1 to 9. Older
catalog entries carry only the AS code, or no codes at all.
"""
import re
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlparse

from ..core.errors import StyleCodeError

STYLE_REFERENCE_PATTERN = re.compile(
    r"^(?P<prefix>[A-Z]+)-(?P<seq>\d+)_(?P<position>\d+)"
    r"_AS(?P<architectural_style>[1-9])"
    r"(?:_VD(?P<visual_density>[1-9]))?"
    r"(?:_MP(?P<mood_palette>[1-9]))?"
    r"\.(?P<ext>[A-Za-z0-9]+)$"
)

CODE_MIN = 1
CODE_MAX = 9


@dataclass(frozen=True)
class StyleCodes:
    """Style codes parsed from one image reference (each 1-9)."""
    architectural_style: int
    visual_density: Optional[int] = None
    mood_palette: Optional[int] = None
    quad_prefix: str = ""
    sequence: int = 0
    position: int = 0

    @property
    def is_legacy(self) -> bool:
        """True when the reference lacked the VD/MP suffix."""
        return self.visual_density is None or self.mood_palette is None


def _filename(reference: str) -> str:
    path = urlparse(reference).path if "://" in reference else reference
    return path.replace("\\", "/").rsplit("/", 1)[-1]


def parse_style_codes(reference: str) -> StyleCodes:
    """
    Parse the style codes from an image reference.

    Args:
        reference: Image URL or path.

    Returns:
        StyleCodes with VD/MP left as None for legacy references.

    Raises:
        StyleCodeError: If the filename does not carry at least an AS code.
    """
    if not reference:
        raise StyleCodeError("Empty image reference")

    match = STYLE_REFERENCE_PATTERN.match(_filename(reference))
    if match is None:
        raise StyleCodeError(f"No style codes in image reference: {reference}")

    def _code(name: str) -> Optional[int]:
        value = match.group(name)
        return int(value) if value is not None else None

    return StyleCodes(
        architectural_style=_code("architectural_style"),
        visual_density=_code("visual_density"),
        mood_palette=_code("mood_palette"),
        quad_prefix=match.group("prefix"),
        sequence=int(match.group("seq")),
        position=int(match.group("position")),
    )


def try_parse_style_codes(reference: str) -> Optional[StyleCodes]:
    """Like parse_style_codes, but returns None instead of raising."""
    try:
        return parse_style_codes(reference)
    except StyleCodeError:
        return None


def format_style_reference(
    quad_id: str,
    position: int,
    architectural_style: int,
    visual_density: Optional[int] = None,
    mood_palette: Optional[int] = None,
    extension: str = "jpg",
) -> str:
    """Build an encoded filename; VD/MP are omitted when not given."""
    for name, code in (
        ("architectural_style", architectural_style),
        ("visual_density", visual_density),
        ("mood_palette", mood_palette),
    ):
        if code is not None and not CODE_MIN <= code <= CODE_MAX:
            raise StyleCodeError(f"{name} must be between {CODE_MIN} and {CODE_MAX}, got {code}")

    name = f"{quad_id}_{position}_AS{architectural_style}"
    if visual_density is not None:
        name += f"_VD{visual_density}"
    if mood_palette is not None:
        name += f"_MP{mood_palette}"
    return f"{name}.{extension}"
