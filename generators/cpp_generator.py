# cpp_generator.py
"""
Base/shared logic for the C++ header generators.
Subclasses render one header each; this class wraps the rendered declarations with the
generated-file banner, the includes and the namespace.
"""

from typing import Any, Dict, List

from generators.generator_utils import GENERATED_BANNER
from spec_model import SpecModel

DEFAULT_NAMESPACE = "Lsp"


class CppGeneratorBase:
    # Header file name and includes, set by subclasses
    filename = ""
    includes: List[str] = []

    def __init__(self, model: SpecModel, options: Dict[str, Any] = None):
        self.model = model
        self.options = options or {}

    @property
    def namespace(self) -> str:
        return self.options.get('namespace') or DEFAULT_NAMESPACE

    def generate_header(self) -> Dict[str, str]:
        """
        Generate the C++ header.
        Returns a dict mapping filename to file content.
        """
        return {self.filename: self._wrap(self.generate_declarations())}

    def generate_declarations(self) -> str:
        """Render the declarations placed inside the namespace."""
        raise NotImplementedError("Subclasses must implement generate_declarations()")

    def _wrap(self, text: str) -> str:
        header = GENERATED_BANNER + "\n#pragma once\n\n"
        # An empty entry separates two include groups
        header += ''.join(f"#include {include}\n" if include else "\n" for include in self.includes)
        return header + f"\nnamespace {self.namespace} {{\n{text}\n}}\n"
