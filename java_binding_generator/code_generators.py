"""
Code generation functions for Java bindings
"""

from .constants import (
    DEFAULT_PACKAGE,
    FUNCTIONS_CLASS,
    INDENT,
    LIBRARY_INTERFACE,
    LIBRARY_NAME,
    REQUIRED_IMPORTS,
)
from .signature import FunctionSignature


def indent_block(code: str, prefix: str = INDENT) -> list[str]:
    """Indent every line of a block, leaving empty lines empty"""
    return [prefix + line if line else "" for line in code.split("\n")]


def remove_semicolon(line: str) -> str:
    if line.endswith(";"):
        return line[:-1]
    return line


class CodeGenerator:
    """Generates Java code from rewritten declaration lines"""

    def __init__(self, library_name: str = LIBRARY_NAME, interface_name: str = LIBRARY_INTERFACE):
        self.library_name = library_name
        self.interface_name = interface_name

    def generate_declaration(self, line: str) -> str:
        """Generate the interface method for a rewritten line"""
        return line.strip()

    def generate_function(self, line: str, signature: FunctionSignature) -> str:
        """Generate the static method forwarding to the native function"""
        method_signature = f"public static {remove_semicolon(line.strip())} {{"
        call = f"{self.interface_name}.{self.library_name}.{signature.name}({', '.join(signature.param_names)});"

        if signature.returns_void:
            body = f"{INDENT}{call}"
        else:
            body = f"{INDENT}return {call}"

        return f"{method_signature}\n{body}\n}}"


class OutputBuilder:
    """Builds the final Java output file"""

    @staticmethod
    def build_interface(declarations: list[str], class_name: str = FUNCTIONS_CLASS,
                        interface_name: str = LIBRARY_INTERFACE, library_name: str = LIBRARY_NAME) -> str:
        """Build the jnr-ffi interface bound to the native library"""
        qualified = f"{class_name}.{interface_name}"
        parts = [
            f"public interface {interface_name} {{",
            f'{INDENT}{qualified} INSTANCE = LibraryLoader.create({qualified}.class).load("{library_name}");',
            f"{INDENT}{qualified} {library_name} = {qualified}.INSTANCE;",
        ]
        parts.extend(INDENT + declaration for declaration in declarations)
        parts.append("}")
        return "\n".join(parts)

    @staticmethod
    def build(interface: str, functions: list[str], package: str = DEFAULT_PACKAGE,
              class_name: str = FUNCTIONS_CLASS) -> str:
        """Build the final Java output"""
        parts = [f"package {package};", ""]

        # Imports
        parts.extend(REQUIRED_IMPORTS)
        parts.append("")

        parts.append(f"public class {class_name} {{")
        parts.extend(indent_block(interface))

        # Forwarding methods
        for function in functions:
            parts.append("")
            parts.extend(indent_block(function))

        parts.append("}")
        return "\n".join(parts) + "\n"
