"""Domain entities."""

from dataclasses import dataclass

from pathtext.domain.enums import RootKind


@dataclass(frozen=True)
class RootInfo:
    """Root classification of a path.

    ``text`` is always one of ``""``, ``"/"`` or ``"<UPPER-LETTER>:/"``.
    """

    kind: RootKind
    text: str = ""
    letter: str | None = None

    @property
    def is_absolute(self) -> bool:
        """True when the path has any root."""
        return self.kind is not RootKind.NONE
