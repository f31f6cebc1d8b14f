"""
Extraction of function signatures from rewritten declaration lines
"""

import re
from dataclasses import dataclass, field

from .constants import VOID_TYPE
from .diagnostics import Diagnostics
from .type_mapper import TypeDictionary


FUNCTION_NAME_PATTERN = re.compile(r"\b([A-Za-z_][A-Za-z0-9_]*)\s*\(")
PARAM_NAME_PATTERN = re.compile(r"\b\w+\b(?=\s*,|\s*\))")
SIGNATURE_PATTERN = re.compile(r"(\w+(?:\[\])?)\s+\w+\s*\(([^)]*)\)")
PARAM_SPLIT_PATTERN = re.compile(r"\s\w+,\s|\s\w+")


@dataclass
class FunctionSignature:
    return_type: str
    name: str
    param_types: list[str] = field(default_factory=list)
    param_names: list[str] = field(default_factory=list)

    @property
    def types(self) -> list[str]:
        """Return type followed by parameter types, blank fragments left out"""
        return [t for t in [self.return_type] + self.param_types if t.strip()]

    @property
    def returns_void(self) -> bool:
        return self.return_type == VOID_TYPE


class SignatureParser:
    """Pattern-based signature extraction

    Names and types are read by independent patterns, so a parameter list
    that is not a plain ``<type> <name>`` sequence can yield lists of
    different lengths.
    """

    @staticmethod
    def extract_function_name(line: str) -> str:
        match = FUNCTION_NAME_PATTERN.search(line)
        return match.group(1) if match else ""

    @staticmethod
    def extract_param_names(line: str) -> list[str]:
        return PARAM_NAME_PATTERN.findall(line)

    @staticmethod
    def extract_types(line: str) -> tuple[str, list[str]]:
        """Return type and parameter types of a line

        Returns:
            (return_type, param_types), ("", []) when the line has no signature
        """
        # Only the first signature on a line is used
        match = SIGNATURE_PATTERN.search(line)
        if not match:
            return "", []

        return_type, params = match.group(1), match.group(2)
        param_types = PARAM_SPLIT_PATTERN.split(params)
        # Drop trailing empty fragments left by the last parameter name
        while param_types and not param_types[-1]:
            param_types.pop()
        return return_type, param_types

    def parse(self, line: str) -> FunctionSignature:
        return_type, param_types = self.extract_types(line)
        return FunctionSignature(
            return_type=return_type,
            name=self.extract_function_name(line),
            param_types=param_types,
            param_names=self.extract_param_names(line),
        )


class UnsupportedTypeRegistry:
    """Types met in signatures that no dictionary rule produces, in first-seen order"""

    def __init__(self):
        self._types: list[str] = []

    def add(self, type_name: str) -> bool:
        if type_name in self._types:
            return False
        self._types.append(type_name)
        return True

    def classify(self, signature: FunctionSignature, type_dictionary: TypeDictionary) -> list[str]:
        """Record the signature's types that are not Java targets

        Returns:
            The types added to the registry by this call
        """
        added = []
        for type_name in signature.types:
            if not type_dictionary.is_target(type_name) and self.add(type_name):
                added.append(type_name)
        return added

    def report(self) -> str:
        return f"Unsupported types: [{', '.join(self._types)}]"

    def clear(self):
        self._types.clear()

    def __contains__(self, type_name: str) -> bool:
        return type_name in self._types

    def __iter__(self):
        return iter(self._types)

    def __len__(self) -> int:
        return len(self._types)


def check_signature(signature: FunctionSignature, line: str, diagnostics: Diagnostics):
    """Report signatures whose extraction looks inconsistent"""
    if not signature.name:
        diagnostics.warning(f"Cannot extract function signature for row: {line}")
        return
    if len(signature.param_names) != len(signature.param_types):
        diagnostics.warning(
            f"Parameter count mismatch in {signature.name}: "
            f"{len(signature.param_names)} names, {len(signature.param_types)} types"
        )
