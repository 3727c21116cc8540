"""
Style sheet loader for the classname CLI.

A style sheet names UI elements and gives each a class string:

    # styles.yaml
    header: p-4 bg-primary r-2
    card:   px-3 py-2 bg-white/90 r-[6dp]
    cta:    bg-gradient-to-r p-2 mt-4

Plain-text sheets are also accepted; each non-blank line is a class string
keyed "line-N" by its 1-based line number.
"""

import yaml
from pathlib import Path
from typing import Any, Dict


class SheetError(Exception):
    """Raised when a style sheet cannot be loaded or has the wrong shape"""
    pass


YAML_SUFFIXES = ('.yaml', '.yml')


class Sheet:
    """
    A loaded style sheet.

    Attributes:
        path: Path the sheet was read from
        entries: Element name -> class string, in file order
    """

    def __init__(self, path: Path):
        """
        Load a style sheet from disk.

        Args:
            path: Sheet file (.yaml/.yml for a mapping, anything else for
                  one class string per line)

        Raises:
            SheetError: If the file is missing, unreadable, invalid YAML, or
                        not a mapping of names to class strings
        """
        self.path = Path(path)

        if not self.path.exists():
            raise SheetError(f"Style sheet not found: {self.path}")

        try:
            text = self.path.read_text(encoding='utf-8')
        except OSError as e:
            raise SheetError(f"Failed to read style sheet {self.path}: {e}")

        if self.path.suffix.lower() in YAML_SUFFIXES:
            self.entries = entries_fromYaml(text)
        else:
            self.entries = entries_fromLines(text)

    def __len__(self) -> int:
        return len(self.entries)

    def __repr__(self) -> str:
        return f"Sheet(path='{self.path}', entries={len(self.entries)})"


def entries_fromYaml(text: str) -> Dict[str, str]:
    """
    Parse YAML sheet text into name -> class string.

    An empty document is an empty sheet. Keys are stringified; values must
    be strings (a null value is treated as an empty class string).

    Raises:
        SheetError: On YAML syntax errors or a non-mapping document
    """
    try:
        document: Any = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SheetError(f"Failed to parse style sheet: {e}")

    if document is None:
        return {}

    if not isinstance(document, dict):
        raise SheetError(
            f"Style sheet must be a mapping of element names to class strings, "
            f"got {type(document).__name__}"
        )

    entries: Dict[str, str] = {}
    for name, classes in document.items():
        if classes is None:
            classes = ""
        if not isinstance(classes, str):
            raise SheetError(
                f"Class string for '{name}' must be a string, got {type(classes).__name__}"
            )
        entries[str(name)] = classes
    return entries


def entries_fromLines(text: str) -> Dict[str, str]:
    """Parse a plain-text sheet: one class string per non-blank line"""
    entries: Dict[str, str] = {}
    for number, line in enumerate(text.splitlines(), start=1):
        if line.strip():
            entries[f"line-{number}"] = line
    return entries
