"""
Console diagnostics collected during a generation run
"""

import sys
from dataclasses import dataclass, field


INFO = "info"
WARNING = "warning"
ERROR = "error"


@dataclass(frozen=True)
class Diagnostic:
    severity: str
    message: str

    def format(self) -> str:
        if self.severity == WARNING:
            return f"Warning: {self.message}"
        if self.severity == ERROR:
            return f"Error: {self.message}"
        return self.message


@dataclass
class Diagnostics:
    """Ordered diagnostic sink

    Entries are always recorded. When ``echo`` is set they are also printed as
    they arrive: info lines on stdout, warnings and errors on stderr.
    """
    echo: bool = False
    entries: list[Diagnostic] = field(default_factory=list)

    def info(self, message: str):
        self._add(Diagnostic(INFO, message))

    def warning(self, message: str):
        self._add(Diagnostic(WARNING, message))

    def error(self, message: str):
        self._add(Diagnostic(ERROR, message))

    def clear(self):
        self.entries.clear()

    def messages(self, severity: str = None) -> list[str]:
        return [d.message for d in self.entries if severity is None or d.severity == severity]

    @property
    def has_errors(self) -> bool:
        return any(d.severity == ERROR for d in self.entries)

    def _add(self, diagnostic: Diagnostic):
        self.entries.append(diagnostic)
        if self.echo:
            stream = sys.stdout if diagnostic.severity == INFO else sys.stderr
            print(diagnostic.format(), file=stream)
