"""Ordered collection of font-face records.

The collection keeps insertion order (parse or merge order) and allows
duplicates. All derived views preserve first-seen order and never sort.
"""

from collections.abc import Iterable, Iterator
from typing import Any, overload

from gfont.domain.typeface import FontFace


def _unique(values: Iterable[Any]) -> list[Any]:
    result: list[Any] = []
    for value in values:
        if value not in result:
            result.append(value)
    return result


class FontFaceCollection:
    """An ordered sequence of FontFace records.

    Example:
        faces = FontFaceCollection([regular, bold])
        for family in faces.families():
            print(family, faces.select(family=family).weights())
    """

    def __init__(self, faces: Iterable[FontFace] | None = None) -> None:
        self._faces: tuple[FontFace, ...] = tuple(faces) if faces is not None else ()

    @property
    def faces(self) -> tuple[FontFace, ...]:
        """Get the records in collection order."""
        return self._faces

    def __len__(self) -> int:
        return len(self._faces)

    def __iter__(self) -> Iterator[FontFace]:
        return iter(self._faces)

    @overload
    def __getitem__(self, index: int) -> FontFace: ...

    @overload
    def __getitem__(self, index: slice) -> "FontFaceCollection": ...

    def __getitem__(self, index: int | slice) -> "FontFace | FontFaceCollection":
        if isinstance(index, slice):
            return FontFaceCollection(self._faces[index])
        return self._faces[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FontFaceCollection):
            return NotImplemented
        return self._faces == other._faces

    def __hash__(self) -> int:
        return hash(self._faces)

    def __add__(self, other: "FontFaceCollection") -> "FontFaceCollection":
        if not isinstance(other, FontFaceCollection):
            return NotImplemented
        return FontFaceCollection(self._faces + other._faces)

    def __repr__(self) -> str:
        return f"FontFaceCollection({list(self._faces)!r})"

    @classmethod
    def merge(cls, collections: Iterable["FontFaceCollection"]) -> "FontFaceCollection":
        """Concatenate several collections in order.

        Args:
            collections: Collections to merge

        Returns:
            New collection holding every record of every input
        """
        faces: list[FontFace] = []
        for collection in collections:
            faces.extend(collection)
        return cls(faces)

    def select(
        self,
        format: str = "",
        family: str = "",
        style: str = "",
        weight: int | None = None,
    ) -> "FontFaceCollection":
        """Select records matching all given filters.

        Empty string filters and a weight of None act as wildcards. Matching
        is exact and case-sensitive.

        Args:
            format: Font format to match
            family: Family name to match
            style: Style keyword to match
            weight: Weight to match (None matches any weight, including 0)

        Returns:
            New collection with matching records in source order
        """
        selected = []
        for face in self._faces:
            if format and face.format != format:
                continue
            if family and face.family != family:
                continue
            if style and face.style != style:
                continue
            if weight is not None and face.weight != weight:
                continue
            selected.append(face)
        return FontFaceCollection(selected)

    def formats(self) -> list[str]:
        """Get distinct non-empty formats in first-seen order."""
        return _unique(face.format for face in self._faces if face.format)

    def families(self) -> list[str]:
        """Get distinct non-empty families in first-seen order."""
        return _unique(face.family for face in self._faces if face.family)

    def styles(self) -> list[str]:
        """Get distinct non-empty styles in first-seen order."""
        return _unique(face.style for face in self._faces if face.style)

    def weights(self) -> list[int]:
        """Get distinct specified weights (>= 1) in first-seen order."""
        return _unique(face.weight for face in self._faces if face.weight >= 1)

    def urls(self) -> list[str]:
        """Get distinct non-empty source URLs in first-seen order."""
        return _unique(face.url for face in self._faces if face.url)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON document shape.

        Returns:
            Dictionary with a "fonts" list
        """
        return {"fonts": [face.to_dict() for face in self._faces]}
