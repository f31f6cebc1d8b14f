"""
Rewriting of raw C declaration lines into Java-typed lines
"""

import re

from .constants import BYTE_ARRAY, POINTER_ARRAY_MARKER, POINTER_MARKER, STRING_MARKER
from .type_mapper import TypeDictionary


# Keywords with no meaning at the FFI boundary
QUALIFIERS = ["extern ", "const ", "static inline "]

# Pointer notations, matched in this order
POINTER_RULES = [
    (re.compile(r"char\s\*"), STRING_MARKER + " "),
    (re.compile(r"\w+\s\*\*"), POINTER_ARRAY_MARKER + " "),
    (re.compile(r"\w+\s\*(?!\*)"), POINTER_MARKER + " "),
]

# Special types or names that the dictionary cannot express
OVERRIDE_RULES = [
    # meos_initialize(const char *tz_str)
    (re.compile(re.escape(STRING_MARKER) + r"\stz_str"), BYTE_ARRAY + " tz_str"),
    # meos_finish(void)
    (re.compile(r"\(void\)"), "()"),
    # temporal_simplify(..., bool synchronized), reserved word in Java
    (re.compile(r"\bsynchronized\b"), "synchronize"),
]


class SignatureRewriter:
    """Applies the rewrite passes to one declaration line"""

    def __init__(self, type_dictionary: TypeDictionary):
        self.type_dictionary = type_dictionary

    def rewrite(self, line: str) -> str:
        if not line.strip():
            return line

        line = self.strip_qualifiers(line)
        line = self.normalize_pointers(line)
        line = self.apply_overrides(line)
        return self.substitute_types(line)

    @staticmethod
    def strip_qualifiers(line: str) -> str:
        for qualifier in QUALIFIERS:
            line = line.replace(qualifier, "")
        return line

    @staticmethod
    def normalize_pointers(line: str) -> str:
        for pattern, marker in POINTER_RULES:
            line = pattern.sub(marker, line)
        return line

    @staticmethod
    def apply_overrides(line: str) -> str:
        for pattern, replacement in OVERRIDE_RULES:
            line = pattern.sub(replacement, line)
        return line

    def substitute_types(self, line: str) -> str:
        """Replace C type tokens with Java types, one dictionary rule at a time"""
        for rule in self.type_dictionary:
            pattern = r"((^|\(|\s)+)" + re.escape(rule.raw) + r"\s"
            replacement = rule.target + " "
            line = re.sub(pattern, lambda m: m.group(1) + replacement, line)
        return line
