"""
Type mapping logic for converting C type tokens to Java types
"""

import re
from dataclasses import dataclass

from .constants import JAVA_TYPE_SEED
from .diagnostics import Diagnostics


TYPEDEF_PATTERN = re.compile(r"^typedef\s(\w+)\s(\w+);")


@dataclass(frozen=True)
class TypeRule:
    """One rewrite rule: a raw C token and the Java token replacing it"""
    raw: str
    target: str


class TypeDictionary:
    """Ordered list of C-to-Java type rewrite rules

    Rules are kept in insertion order and applied in that order by the
    rewriter, so a later rule may rewrite the output of an earlier one.
    Re-adding an existing raw token replaces its target in place.
    """

    def __init__(self, seed=None):
        self._rules: list[TypeRule] = []
        self._frozen = False
        for raw, target in (JAVA_TYPE_SEED if seed is None else seed):
            self.add(raw, target)

    def add(self, raw: str, target: str):
        if self._frozen:
            raise RuntimeError(f"Cannot add type '{raw}': type dictionary is frozen")
        for i, rule in enumerate(self._rules):
            if rule.raw == raw:
                self._rules[i] = TypeRule(raw, target)
                return
        self._rules.append(TypeRule(raw, target))

    def lookup(self, raw: str) -> str | None:
        for rule in self._rules:
            if rule.raw == raw:
                return rule.target
        return None

    def is_target(self, token: str) -> bool:
        """Check whether a token is one of the Java types the dictionary produces"""
        return any(rule.target == token for rule in self._rules)

    def freeze(self):
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __contains__(self, raw: str) -> bool:
        return self.lookup(raw) is not None

    def __iter__(self):
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)


class TypedefResolver:
    """Extends a TypeDictionary with typedefs read one per line"""

    def __init__(self, type_dictionary: TypeDictionary, diagnostics: Diagnostics = None):
        self.type_dictionary = type_dictionary
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()

    def register_typedef(self, line: str) -> TypeRule | None:
        """Register the typedef declared on a line

        The raw type is resolved through the dictionary as it stands now, one
        hop only. Unknown raw types are registered verbatim.

        Returns:
            The registered rule, or None if the line is not a simple typedef
        """
        match = TYPEDEF_PATTERN.match(line)
        if not match:
            self.diagnostics.warning(f"Cannot extract type for row: {line}")
            return None

        raw_type, alias = match.group(1), match.group(2)
        resolved = self.type_dictionary.lookup(raw_type)
        if resolved is None:
            resolved = raw_type

        self.type_dictionary.add(alias, resolved)
        return TypeRule(alias, resolved)

    def resolve(self, lines) -> list[TypeRule]:
        """Register every typedef line in file order"""
        registered = []
        for line in lines:
            if not line.strip():
                continue
            rule = self.register_typedef(line)
            if rule:
                registered.append(rule)
        return registered
