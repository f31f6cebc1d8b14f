"""
Java Bindings Generator - Generate jnr-ffi bindings for the MEOS library from extracted C declarations
"""

from .generator import JavaBindingsGenerator, GenerationResult
from .type_mapper import TypeDictionary, TypedefResolver
from .rewriter import SignatureRewriter
from .signature import FunctionSignature, SignatureParser, UnsupportedTypeRegistry
from .code_generators import CodeGenerator, OutputBuilder
from .constants import (
    JAVA_TYPE_SEED,
    REQUIRED_IMPORTS,
    DEFAULT_PACKAGE,
    FUNCTIONS_CLASS,
    LIBRARY_NAME,
)

__version__ = "0.1.0"

__all__ = [
    "JavaBindingsGenerator",
    "GenerationResult",
    "TypeDictionary",
    "TypedefResolver",
    "SignatureRewriter",
    "FunctionSignature",
    "SignatureParser",
    "UnsupportedTypeRegistry",
    "CodeGenerator",
    "OutputBuilder",
    "JAVA_TYPE_SEED",
    "REQUIRED_IMPORTS",
    "DEFAULT_PACKAGE",
    "FUNCTIONS_CLASS",
    "LIBRARY_NAME",
]
