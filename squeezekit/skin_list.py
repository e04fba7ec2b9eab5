"""List of the GUI skins found in a skin directory."""

from __future__ import annotations

import codecs
import fnmatch
from pathlib import Path
from typing import List, Optional, Union

#: Name of the file holding the default skin's name.
DEFAULT_SKIN_FILE = "default_skin.ini"

#: Skin used when no default has been stored yet.
DEFAULT_SKIN_NAME = "Default"

#: File name pattern of skin files.
SKIN_PATTERN = "*.skin"


def _read_text(path: Path) -> str:
    data = path.read_bytes()
    if data.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)):
        return data.decode("utf-16")
    if data.startswith(codecs.BOM_UTF8):
        return data.decode("utf-8-sig")
    return data.decode("utf-8", errors="replace")


def _write_text(path: Path, text: str) -> None:
    # Unicode with byte order mark
    path.write_bytes(text.encode("utf-16"))


class SkinList:
    """Skin names in a directory, and the name of the default skin."""

    def __init__(self) -> None:
        self.default_file: Optional[Path] = None
        self.default_name = ""
        self._names: List[str] = []

    def fill(self, directory: Union[str, Path]) -> None:
        """Collect all skins in ``directory`` and load the default skin name."""
        directory = Path(directory)
        self.default_file = directory / DEFAULT_SKIN_FILE
        if not self.default_file.is_file():
            _write_text(self.default_file, DEFAULT_SKIN_NAME)
        self.default_name = _read_text(self.default_file)

        skins = [
            entry
            for entry in directory.iterdir()
            if entry.is_file() and fnmatch.fnmatch(entry.name.lower(), SKIN_PATTERN)
        ]
        self._names = [entry.stem for entry in sorted(skins, key=lambda p: p.name.lower())]

    def __len__(self) -> int:
        return len(self._names)

    @property
    def names(self) -> List[str]:
        """Skin names in list order."""
        return list(self._names)

    def row(self, name: str) -> Optional[int]:
        """Return the row of the first skin called ``name``, or None."""
        try:
            return self._names.index(name)
        except ValueError:
            return None

    def skin_name(self, row: int) -> str:
        """Return the skin name in ``row``, or an empty string if invalid."""
        if 0 <= row < len(self._names):
            return self._names[row]
        return ""

    def is_default(self, row: int) -> bool:
        """True if ``row`` holds the default skin."""
        return self.skin_name(row) == self.default_name

    def set_default(self, row: int) -> bool:
        """Make the skin in ``row`` the default; False for an invalid row."""
        if not 0 <= row < len(self._names) or self.default_file is None:
            return False
        self.default_name = self._names[row]
        _write_text(self.default_file, self.default_name)
        return True