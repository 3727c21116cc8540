"""
Compiler for resolved style sheets

Writes resolved StyleSequences to a JSON document.
"""

import json
from typing import Dict, Any, Optional
from pathlib import Path

from ..config import AppSettings, appsettings
from ..models.parser import StyleSequence
from ..models.style import ComputedStyle
from .compose import compose, directive_apply
from .log import LOG


class Compiler:
    """
    Compiles resolved style sheets to JSON

    Responsibilities:
    - Export each element's directives in emission order
    - Record unresolved tokens
    - Fold directives into a computed style
    - Write the output file
    """

    def __init__(
        self,
        sheet: Dict[str, StyleSequence],
        output_dir: str,
        sources: Optional[Dict[str, str]] = None,
        settings: Optional[AppSettings] = None,
    ) -> None:
        """
        Initialize compiler

        Args:
            sheet: Element name -> resolved StyleSequence
            output_dir: Directory for compiled output
            sources: Element name -> original class string (optional)
            settings: Output settings (defaults to appsettings)
        """
        self.sheet = sheet
        self.output_dir = Path(output_dir)
        self.sources = sources or {}
        self.settings = settings if settings is not None else appsettings
        self.unresolved_count = 0

    def compile(self) -> Dict[str, Any]:
        """
        Compile the sheet to a JSON file

        Returns:
            dict with compilation results and statistics
        """
        LOG("Starting compilation...", level=2)

        self.output_dir.mkdir(parents=True, exist_ok=True)

        self.unresolved_count = 0
        document = {
            "elements": {
                name: self.element_compile(name, sequence)
                for name, sequence in self.sheet.items()
            }
        }

        output_file = self.output_dir / self.settings.output_filename
        output_file.write_text(
            json.dumps(document, indent=self.settings.json_indent) + "\n",
            encoding='utf-8',
        )
        LOG(f"Wrote {output_file}", level=2)

        return {
            'status': True,
            'output_file': str(output_file),
            'element_count': len(self.sheet),
            'unresolved_count': self.unresolved_count,
        }

    def element_compile(self, name: str, sequence: StyleSequence) -> Dict[str, Any]:
        """
        Compile one element's sequence to a JSON-ready dict

        Args:
            name: Element name
            sequence: Resolved sequence

        Returns:
            dict with classes, directives, unresolved tokens and computed style
        """
        unresolved = sequence.unresolved()
        self.unresolved_count += len(unresolved)
        if unresolved:
            LOG(f"Element '{name}': {len(unresolved)} unresolved token(s)", level=2)

        computed = compose(sequence, directive_apply, ComputedStyle())

        return {
            'classes': self.sources.get(name, " ".join(sequence.tokens)),
            'directives': [directive.dict_export() for directive in sequence.resolved()],
            'unresolved': unresolved,
            'computed': computed.dict_export(),
        }
