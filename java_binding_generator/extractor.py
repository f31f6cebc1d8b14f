"""
Extraction of function and typedef declarations from a C header with libclang

Produces the line-oriented inputs consumed by the generator: one function
declaration per line and one typedef per line.
"""

import sys
from pathlib import Path
import clang.cindex
from clang.cindex import CursorKind, StorageClass, TypeKind


def join_type_and_name(type_spelling: str, name: str) -> str:
    """Glue a declarator name to its type, C style (``char *name``)"""
    if type_spelling.endswith("*"):
        return f"{type_spelling}{name}"
    return f"{type_spelling} {name}"


class HeaderExtractor:
    """Collects declarations located in a single header file"""

    def __init__(self, include_dirs: list[str] = None):
        self.include_dirs = include_dirs or []

    @staticmethod
    def format_function(cursor) -> str:
        """Format a FUNCTION_DECL cursor as a one-line declaration"""
        # Variadic functions cannot be forwarded
        if cursor.type.kind == TypeKind.FUNCTIONPROTO and cursor.type.is_function_variadic():
            return ""

        params = []
        for arg in cursor.get_arguments():
            arg_name = arg.spelling or f"arg{len(params)}"
            params.append(join_type_and_name(arg.type.spelling, arg_name))
        params_str = ", ".join(params) if params else "void"

        prefix = ""
        if cursor.storage_class == StorageClass.EXTERN:
            prefix = "extern "
        elif cursor.storage_class == StorageClass.STATIC:
            prefix = "static inline "

        return f"{prefix}{join_type_and_name(cursor.result_type.spelling, cursor.spelling)}({params_str});"

    @staticmethod
    def format_typedef(cursor) -> str:
        """Format a TYPEDEF_DECL cursor as a one-line typedef"""
        return f"typedef {cursor.underlying_typedef_type.spelling} {cursor.spelling};"

    def extract(self, header_file: str) -> tuple[list[str], list[str]]:
        """Extract declarations from a header

        Returns:
            (function_lines, typedef_lines) in source order
        """
        if not Path(header_file).exists():
            raise FileNotFoundError(f"Header file not found: {header_file}")

        clang_args = ["-x", "c"]
        for include_dir in self.include_dirs:
            clang_args.append(f"-I{include_dir}")

        index = clang.cindex.Index.create()
        tu = index.parse(header_file, args=clang_args)

        error_messages = []
        has_fatal_errors = False
        for diag in tu.diagnostics:
            if diag.severity >= clang.cindex.Diagnostic.Error:
                print(f"Error in {header_file}: {diag.spelling}", file=sys.stderr)
                error_messages.append(diag.spelling)
            if diag.severity >= clang.cindex.Diagnostic.Fatal:
                has_fatal_errors = True

        if has_fatal_errors:
            raise RuntimeError(f"Fatal parsing errors in {header_file}. Errors: {'; '.join(error_messages)}")

        header_path = Path(header_file).resolve()
        function_lines = []
        typedef_lines = []
        seen_functions = set()

        for cursor in tu.cursor.get_children():
            if not cursor.location.file or Path(cursor.location.file.name).resolve() != header_path:
                continue

            if cursor.kind == CursorKind.FUNCTION_DECL:
                # Repeated prototypes are emitted once
                if cursor.spelling in seen_functions:
                    continue
                line = self.format_function(cursor)
                if line:
                    function_lines.append(line)
                    seen_functions.add(cursor.spelling)
            elif cursor.kind == CursorKind.TYPEDEF_DECL:
                typedef_lines.append(self.format_typedef(cursor))

        return function_lines, typedef_lines

    def write(self, header_file: str, functions_file: str, typedefs_file: str) -> tuple[list[str], list[str]]:
        """Extract declarations and write them to the generator's input files"""
        function_lines, typedef_lines = self.extract(header_file)

        for path, lines in ((functions_file, function_lines), (typedefs_file, typedef_lines)):
            Path(path).parent.mkdir(parents=True, exist_ok=True)
            Path(path).write_text("".join(line + "\n" for line in lines))

        print(f"Extracted {len(function_lines)} function(s) and {len(typedef_lines)} typedef(s) from {header_file}")
        return function_lines, typedef_lines
