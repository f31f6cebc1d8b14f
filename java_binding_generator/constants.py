"""
Constants and mappings for Java (jnr-ffi) bindings generation
"""

# Marker tokens produced by pointer normalization
STRING_MARKER = "*char"
POINTER_ARRAY_MARKER = "*[]"
POINTER_MARKER = "*"
BYTE_ARRAY = "byte[]"

# Java "no value" return type
VOID_TYPE = "void"

# Mapping from C type tokens to Java types, applied in this order
JAVA_TYPE_SEED = [
    (POINTER_MARKER, "Pointer"),
    (POINTER_ARRAY_MARKER, "Pointer"),
    (BYTE_ARRAY, "byte[]"),
    (STRING_MARKER, "String"),
    ("void", VOID_TYPE),
    ("bool", "boolean"),
    ("float", "float"),
    ("double", "double"),
    ("int", "int"),
    ("int32_t", "int"),
    ("int32", "int"),
    ("int64", "long"),
    ("uint8_t", "short"),
    ("uint16_t", "short"),
    ("uint32", "int"),
    ("uint64", "long"),
    ("uintptr_t", "long"),
    ("size_t", "long"),
    ("interpType", "int"),  # enum in C
]

# Imports required by generated code
REQUIRED_IMPORTS = [
    "import jnr.ffi.LibraryLoader;",
    "import jnr.ffi.Pointer;",
]

DEFAULT_PACKAGE = "function"

# Name of the generated class holding the forwarding methods
FUNCTIONS_CLASS = "functions"

# Name of the nested jnr-ffi interface
LIBRARY_INTERFACE = "MeosLibrary"

# Native library loaded by jnr-ffi
LIBRARY_NAME = "meos"

INDENT = "    "

# Default locations of the extracted declarations and the generated class
DEFAULT_FUNCTIONS_PATH = "tmp/functions.h"
DEFAULT_TYPEDEFS_PATH = "tmp/types.h"
DEFAULT_OUTPUT_PATH = "../functions.java"
