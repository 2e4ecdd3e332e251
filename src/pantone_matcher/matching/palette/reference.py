"""
reference.py
============

Does: Define the immutable reference palette records and the builders used to
      prepare them from a hex or a Lab source.
Used By: Palette loader, matcher, search helpers, tests.
Returns: ReferenceColor records and ReferencePalette containers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping, Optional, Tuple

from pantone_matcher.matching.color.types import RGB, Lab
from pantone_matcher.matching.color.utils.conversions import (
    hex_to_rgb,
    lab_to_rgb,
    rgb_to_hex,
    rgb_to_lab,
)
from pantone_matcher.matching.general.utils import ConfigParseError

__all__ = [
    "PaletteFormatError",
    "ReferenceColor",
    "ReferencePalette",
    "reference_from_hex",
    "reference_from_lab",
    "reference_from_mapping",
]
__docformat__ = "google"

LAB_STORAGE_DECIMALS = 2


class PaletteFormatError(ConfigParseError):
    """Raise when a palette record or payload is malformed."""


@dataclass(frozen=True)
class ReferenceColor:
    """One named spot color of the reference palette."""

    name: str
    code: str
    rgb: RGB
    hex: str
    lab: Lab

    def to_dict(self) -> dict[str, Any]:
        """Does: Storage/JSON shape: {name, code, hex, rgb:{r,g,b}, lab:{L,a,b}}."""
        return {
            "name": self.name,
            "code": self.code,
            "hex": self.hex,
            "rgb": self.rgb._asdict(),
            "lab": self.lab._asdict(),
        }


def _round_lab(lab: Lab, ndigits: int = LAB_STORAGE_DECIMALS) -> Lab:
    return Lab(*(round(v, ndigits) for v in lab))


def reference_from_hex(name: str, code: str, hex_value: str) -> ReferenceColor:
    """
    Does: Build a record from a hex source; Lab is derived and rounded for storage.

    Raises:
        PaletteFormatError: if the hex is malformed.
    """
    rgb = hex_to_rgb(hex_value)
    if rgb is None:
        raise PaletteFormatError(f"{name!r}: invalid hex {hex_value!r}")
    return ReferenceColor(
        name=name,
        code=code,
        rgb=rgb,
        hex=rgb_to_hex(*rgb).upper(),
        lab=_round_lab(rgb_to_lab(*rgb)),
    )


def reference_from_lab(name: str, code: str, L: float, a: float, b: float) -> ReferenceColor:
    """Does: Build a record from measured Lab; RGB/hex come from the inverse transform."""
    rgb = lab_to_rgb(L, a, b)
    return ReferenceColor(
        name=name,
        code=code,
        rgb=rgb,
        hex=rgb_to_hex(*rgb).upper(),
        lab=_round_lab(Lab(L, a, b)),
    )


# ── Mapping → record (palette JSON) ──────────────────────────────────────────
def _coerce_rgb(val: Any, where: str) -> RGB:
    if isinstance(val, Mapping):
        try:
            parts = (val["r"], val["g"], val["b"])
        except KeyError as e:
            raise PaletteFormatError(f"{where}: rgb missing channel {e}") from e
    elif isinstance(val, (list, tuple)) and len(val) == 3:
        parts = tuple(val)
    else:
        raise PaletteFormatError(f"{where}: rgb must be {{r,g,b}} or a 3-item list")
    if not all(isinstance(x, int) and not isinstance(x, bool) and 0 <= x <= 255 for x in parts):
        raise PaletteFormatError(f"{where}: rgb channels must be ints in [0,255], got {parts}")
    return RGB(*parts)


def _coerce_lab(val: Any, where: str) -> Lab:
    if isinstance(val, Mapping):
        try:
            parts = (val["L"], val["a"], val["b"])
        except KeyError as e:
            raise PaletteFormatError(f"{where}: lab missing component {e}") from e
    elif isinstance(val, (list, tuple)) and len(val) == 3:
        parts = tuple(val)
    else:
        raise PaletteFormatError(f"{where}: lab must be {{L,a,b}} or a 3-item list")
    if not all(isinstance(x, (int, float)) and not isinstance(x, bool) for x in parts):
        raise PaletteFormatError(f"{where}: lab components must be numbers, got {parts}")
    return Lab(*(float(x) for x in parts))


def reference_from_mapping(record: Mapping[str, Any], index: int = 0) -> ReferenceColor:
    """
    Does: Validate one palette JSON record. 'name', 'code' and 'hex' are required;
          'rgb' and 'lab' are derived from the hex when absent, and a given 'rgb'
          must agree with the hex.

    Raises:
        PaletteFormatError: on missing fields or bad values.
    """
    where = f"colors[{index}]"
    if not isinstance(record, Mapping):
        raise PaletteFormatError(f"{where}: expected an object, got {type(record).__name__}")

    name = record.get("name")
    code = record.get("code")
    hex_value = record.get("hex")
    for key, val in (("name", name), ("code", code), ("hex", hex_value)):
        if not isinstance(val, str) or not val.strip():
            raise PaletteFormatError(f"{where}: missing or empty '{key}'")

    try:
        derived = reference_from_hex(name, code, hex_value)
    except PaletteFormatError as e:
        raise PaletteFormatError(f"{where}: {e}") from e
    if record.get("rgb") is not None:
        rgb = _coerce_rgb(record["rgb"], where)
        if rgb != derived.rgb:
            raise PaletteFormatError(
                f"{where}: rgb {tuple(rgb)} does not match hex {derived.hex} {tuple(derived.rgb)}"
            )
    lab = _coerce_lab(record["lab"], where) if record.get("lab") is not None else derived.lab

    return ReferenceColor(name=name, code=code, rgb=derived.rgb, hex=derived.hex, lab=lab)


# ── Palette container ────────────────────────────────────────────────────────
@dataclass(frozen=True)
class ReferencePalette:
    """Read-only collection of reference colors plus its metadata."""

    colors: Tuple[ReferenceColor, ...]
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "colors", tuple(self.colors))
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    @classmethod
    def from_colors(
        cls, colors: Iterable[ReferenceColor], metadata: Optional[Mapping[str, Any]] = None
    ) -> ReferencePalette:
        return cls(colors=tuple(colors), metadata=metadata or {})

    def __len__(self) -> int:
        return len(self.colors)

    def __iter__(self) -> Iterator[ReferenceColor]:
        return iter(self.colors)

    def __getitem__(self, index: int) -> ReferenceColor:
        return self.colors[index]

    @property
    def title(self) -> str:
        return str(self.metadata.get("title", ""))

    def stats(self) -> dict[str, int]:
        """Does: Count total colors, unique names and unique codes."""
        return {
            "totalColors": len(self.colors),
            "uniqueNames": len({c.name for c in self.colors}),
            "uniqueCodes": len({c.code for c in self.colors}),
        }

    def find_by_name(self, name: str) -> Optional[ReferenceColor]:
        """Does: Case-insensitive exact name lookup; None when absent."""
        key = name.strip().lower()
        return next((c for c in self.colors if c.name.lower() == key), None)

    def find_by_code(self, code: str) -> Optional[ReferenceColor]:
        """Does: Case-insensitive exact code lookup (e.g. '2097-c'); None when absent."""
        key = code.strip().lower()
        return next((c for c in self.colors if c.code.lower() == key), None)

    def search(self, query: str) -> list[ReferenceColor]:
        """Does: Case-insensitive substring search over name and code, palette order."""
        q = query.strip().lower()
        if not q:
            return list(self.colors)
        return [c for c in self.colors if q in c.name.lower() or q in c.code.lower()]

    def to_dict(self) -> dict[str, Any]:
        return {
            "metadata": dict(self.metadata),
            "colors": [c.to_dict() for c in self.colors],
            "stats": self.stats(),
        }
