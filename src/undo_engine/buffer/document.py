"""Character storage for undo_engine buffers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Tuple

Styles = Tuple[FrozenSet[str], ...]

_PLAIN: FrozenSet[str] = frozenset()


@dataclass(slots=True)
class FormattedText:
    """Immutable-ish text with one format set per character.

    Every edit returns a new instance with a bumped version; the styles tuple
    always has exactly one entry per character so formats move with the text
    they belong to. Callers validate offsets before calling in.
    """

    text: str = ""
    styles: Styles = field(default_factory=tuple)
    version: int = 0

    @classmethod
    def from_text(cls, text: str) -> "FormattedText":
        return cls(text=text, styles=(_PLAIN,) * len(text))

    def __len__(self) -> int:
        return len(self.text)

    def slice(self, start: int, length: int) -> str:
        return self.text[start : start + length]

    def insert(self, position: int, text: str) -> "FormattedText":
        """Return a copy with ``text`` inserted unformatted at ``position``."""

        return FormattedText(
            text=self.text[:position] + text + self.text[position:],
            styles=self.styles[:position] + (_PLAIN,) * len(text) + self.styles[position:],
            version=self.version + 1,
        )

    def delete(self, position: int, length: int) -> "FormattedText":
        """Return a copy without ``[position, position + length)``."""

        end = position + length
        return FormattedText(
            text=self.text[:position] + self.text[end:],
            styles=self.styles[:position] + self.styles[end:],
            version=self.version + 1,
        )

    def restyle(
        self, start: int, length: int, kind: str, *, enabled: bool
    ) -> "FormattedText":
        """Return a copy with ``kind`` added to (or removed from) a range."""

        end = start + length
        if enabled:
            updated = tuple(style | {kind} for style in self.styles[start:end])
        else:
            updated = tuple(style - {kind} for style in self.styles[start:end])
        return FormattedText(
            text=self.text,
            styles=self.styles[:start] + updated + self.styles[end:],
            version=self.version + 1,
        )

    def formats_at(self, index: int) -> FrozenSet[str]:
        return self.styles[index]

    def ranges(self, kind: str) -> Tuple[Tuple[int, int], ...]:
        """Collapse the characters carrying ``kind`` into ``(start, length)`` runs."""

        runs: list[Tuple[int, int]] = []
        start: int | None = None
        for index, style in enumerate(self.styles):
            if kind in style:
                if start is None:
                    start = index
            elif start is not None:
                runs.append((start, index - start))
                start = None
        if start is not None:
            runs.append((start, len(self.styles) - start))
        return tuple(runs)
