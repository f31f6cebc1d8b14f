#!/usr/bin/env python3
"""
CLI entry point for Java bindings generator
Generates the jnr-ffi interface and forwarding methods for the MEOS library
"""

import argparse
import sys
import os
import clang.cindex

# Add parent directory to sys.path for direct execution
if __name__ == '__main__' and __package__ is None:
    sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from java_binding_generator.config import BindingConfig, parse_config_file
from java_binding_generator.extractor import HeaderExtractor
from java_binding_generator.generator import JavaBindingsGenerator


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate jnr-ffi Java bindings from extracted C declarations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s
  %(prog)s -f tmp/functions.h -t tmp/types.h -o ../functions.java
  %(prog)s -C bindings.xml -H /usr/local/include/meos.h
        """
    )

    parser.add_argument(
        "-C", "--config",
        metavar="CONFIG_FILE",
        help="XML configuration file"
    )

    parser.add_argument(
        "-f", "--functions",
        metavar="FILE",
        help="File with one C function declaration per line"
    )

    parser.add_argument(
        "-t", "--typedefs",
        metavar="FILE",
        help="File with one C typedef per line"
    )

    parser.add_argument(
        "-o", "--output",
        metavar="FILE",
        help="Generated Java file"
    )

    parser.add_argument(
        "-H", "--header",
        metavar="HEADER",
        help="C header to extract the function and typedef files from before generating"
    )

    parser.add_argument(
        "-I", "--include",
        action="append",
        default=[],
        metavar="DIRECTORY",
        help="Include directory used when extracting from a header (repeatable)"
    )

    parser.add_argument(
        "--clang-path",
        metavar="PATH",
        help="Path to libclang library (if not in default location)"
    )

    args = parser.parse_args(argv)

    config = BindingConfig()
    if args.config:
        try:
            config = parse_config_file(args.config)
        except (ValueError, FileNotFoundError) as e:
            print(f"Error reading config file: {e}", file=sys.stderr)
            sys.exit(1)

    # Command line overrides the configuration file
    functions_file = args.functions or config.functions_file
    typedefs_file = args.typedefs or config.typedefs_file
    output_file = args.output or config.output_file
    header_file = args.header or config.header_file
    include_dirs = config.include_dirs + args.include

    # Set clang library path if provided
    if args.clang_path:
        clang.cindex.Config.set_library_path(args.clang_path)

    if header_file:
        try:
            HeaderExtractor(include_dirs).write(header_file, functions_file, typedefs_file)
        except (RuntimeError, OSError, clang.cindex.LibclangError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

    generator = JavaBindingsGenerator(
        package=config.package,
        class_name=config.class_name,
        library_name=config.library_name,
        interface_name=config.interface_name,
        extra_types=config.extra_types,
        echo=True,
    )
    result = generator.generate_files(functions_file, typedefs_file, output_file)
    if not result.written:
        sys.exit(1)


if __name__ == "__main__":
    main()
