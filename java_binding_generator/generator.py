"""
Main Java bindings generator orchestration
"""

import os
import stat
import tempfile
from dataclasses import dataclass, field
from pathlib import Path

from .code_generators import CodeGenerator, OutputBuilder
from .constants import (
    DEFAULT_FUNCTIONS_PATH,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_PACKAGE,
    DEFAULT_TYPEDEFS_PATH,
    FUNCTIONS_CLASS,
    JAVA_TYPE_SEED,
    LIBRARY_INTERFACE,
    LIBRARY_NAME,
)
from .diagnostics import Diagnostics
from .rewriter import SignatureRewriter
from .signature import FunctionSignature, SignatureParser, UnsupportedTypeRegistry, check_signature
from .type_mapper import TypeDictionary, TypedefResolver


@dataclass
class GenerationResult:
    output: str
    rewritten_lines: list[str] = field(default_factory=list)
    signatures: list[FunctionSignature] = field(default_factory=list)
    unsupported_types: list[str] = field(default_factory=list)
    diagnostics: Diagnostics = field(default_factory=Diagnostics)
    written: bool = False


class JavaBindingsGenerator:
    """Main orchestrator for generating jnr-ffi bindings from extracted C declarations"""

    def __init__(self, package: str = DEFAULT_PACKAGE, class_name: str = FUNCTIONS_CLASS,
                 library_name: str = LIBRARY_NAME, interface_name: str = LIBRARY_INTERFACE,
                 extra_types: list[tuple[str, str]] = None, echo: bool = False):
        self.package = package
        self.class_name = class_name
        self.library_name = library_name
        self.interface_name = interface_name
        self.seed = list(JAVA_TYPE_SEED) + list(extra_types or [])

        self.code_generator = CodeGenerator(library_name, interface_name)
        self.parser = SignatureParser()
        self.echo = echo
        self._clear_state()

    def _clear_state(self):
        """Clear all accumulated state for a new generation run"""
        self.type_dictionary = TypeDictionary(self.seed)
        self.unsupported_types = UnsupportedTypeRegistry()
        self.diagnostics = Diagnostics(echo=self.echo)

    def generate(self, typedef_lines, declaration_lines) -> GenerationResult:
        """Generate the Java class from typedef and declaration lines

        No file is read or written here.
        """
        self._clear_state()
        return self._run(typedef_lines, declaration_lines)

    def _run(self, typedef_lines, declaration_lines) -> GenerationResult:
        TypedefResolver(self.type_dictionary, self.diagnostics).resolve(typedef_lines)
        self.type_dictionary.freeze()

        rewriter = SignatureRewriter(self.type_dictionary)
        rewritten_lines = []
        signatures = []
        for line in declaration_lines:
            rewritten = rewriter.rewrite(line)
            if not rewritten.strip():
                continue
            signature = self.parser.parse(rewritten)
            check_signature(signature, rewritten, self.diagnostics)
            self.unsupported_types.classify(signature, self.type_dictionary)
            rewritten_lines.append(rewritten)
            signatures.append(signature)

        self.diagnostics.info(self.unsupported_types.report())

        declarations = [self.code_generator.generate_declaration(line) for line in rewritten_lines]
        functions = [
            self.code_generator.generate_function(line, signature)
            for line, signature in zip(rewritten_lines, signatures)
        ]

        interface = OutputBuilder.build_interface(
            declarations,
            class_name=self.class_name,
            interface_name=self.interface_name,
            library_name=self.library_name,
        )
        output = OutputBuilder.build(interface, functions, package=self.package, class_name=self.class_name)

        return GenerationResult(
            output=output,
            rewritten_lines=rewritten_lines,
            signatures=signatures,
            unsupported_types=list(self.unsupported_types),
            diagnostics=self.diagnostics,
        )

    def generate_files(self, functions_file: str = DEFAULT_FUNCTIONS_PATH,
                       typedefs_file: str = DEFAULT_TYPEDEFS_PATH,
                       output_file: str = DEFAULT_OUTPUT_PATH) -> GenerationResult:
        """Read the extracted declarations, generate and write the Java class"""
        self._clear_state()
        typedef_lines = self._read_lines(typedefs_file)
        declaration_lines = self._read_lines(functions_file)

        result = self._run(typedef_lines, declaration_lines)
        result.written = self._write_output(output_file, result.output)
        return result

    def _read_lines(self, path: str) -> list[str]:
        try:
            return Path(path).read_text(encoding="utf-8").splitlines()
        except (OSError, UnicodeDecodeError) as e:
            self.diagnostics.error(f"Cannot read file {path}: {e}")
            return []

    def _write_output(self, output_file: str, output: str) -> bool:
        """Replace the output file atomically"""
        output_path = Path(output_file)
        tmp_name = None
        try:
            with tempfile.NamedTemporaryFile("w", encoding="utf-8", dir=output_path.parent,
                                             prefix=f".{output_path.name}.", suffix=".tmp", delete=False) as f:
                tmp_name = f.name
                f.write(output)
            # Temporary files are created 0600; give the result the usual file mode
            os.chmod(tmp_name, self._output_mode(output_path))
            os.replace(tmp_name, output_path)
        except OSError as e:
            if tmp_name:
                Path(tmp_name).unlink(missing_ok=True)
            self.diagnostics.error(f"Cannot create file {output_file}: {e}")
            return False

        self.diagnostics.info(f"Generated bindings: {output_file}")
        return True

    @staticmethod
    def _output_mode(output_path: Path) -> int:
        """Mode of the existing output, or the umask default for a new file"""
        try:
            return stat.S_IMODE(output_path.stat().st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask
