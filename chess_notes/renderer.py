"""Square-to-note rendering, natural or chromatic."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from chess_notes.moves import Square

REST = "X"                                      # muted note for unparseable moves

# chess has eight files, the note alphabet seven: H sounds as A
NATURAL_FILE_ALIASES = {"H": "A"}

# eight chromatic steps per file, indexed by rank - 1
# H repeats A one octave up
CHROMATIC_TABLE = {
    "A": ("A3", "A#3", "B3", "C4", "C#4", "D4", "D#4", "E4"),
    "B": ("B3", "C4", "C#4", "D4", "D#4", "E4", "F4", "F#4"),
    "C": ("C4", "C#4", "D4", "D#4", "E4", "F4", "F#4", "G4"),
    "D": ("D4", "D#4", "E4", "F4", "F#4", "G4", "G#4", "A4"),
    "E": ("E4", "F4", "F#4", "G4", "G#4", "A4", "A#4", "B4"),
    "F": ("F4", "F#4", "G4", "G#4", "A4", "A#4", "B4", "C5"),
    "G": ("G4", "G#4", "A4", "A#4", "B4", "C5", "C#5", "D5"),
    "H": ("A4", "A#4", "B4", "C5", "C#5", "D5", "D#5", "E5"),
}


@dataclass(frozen=True, slots=True)
class RenderingOption:
    """How squares become notes; applies to every move of a conversion call."""

    chromatic: bool = False

    @classmethod
    def from_mapping(cls, options: Mapping[str, object]) -> RenderingOption:
        """Build from an options object such as ``{"chromatic": True}``."""
        unknown = set(options) - {"chromatic"}
        if unknown:
            raise ValueError(f"Unknown rendering options: {sorted(unknown)}")
        chromatic = options.get("chromatic", False)
        if not isinstance(chromatic, bool):
            raise ValueError(f"'chromatic' must be a boolean, got {chromatic!r}")
        return cls(chromatic=chromatic)


DEFAULT_OPTION = RenderingOption()


def render(square, option: RenderingOption | None = None) -> str:
    """Note name for *square*; anything that is not a :class:`Square` is a rest."""
    if not isinstance(square, Square):
        return REST
    if option is None:
        option = DEFAULT_OPTION

    if option.chromatic:
        return CHROMATIC_TABLE[square.file][square.rank - 1]
    return f"{NATURAL_FILE_ALIASES.get(square.file, square.file)}{square.rank}"
