"""
XML configuration file parsing for Java bindings generator
"""

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

from .constants import (
    DEFAULT_FUNCTIONS_PATH,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_PACKAGE,
    DEFAULT_TYPEDEFS_PATH,
    FUNCTIONS_CLASS,
    LIBRARY_INTERFACE,
    LIBRARY_NAME,
)


@dataclass
class BindingConfig:
    """Configuration for Java bindings generation"""
    package: str = DEFAULT_PACKAGE
    class_name: str = FUNCTIONS_CLASS
    library_name: str = LIBRARY_NAME
    interface_name: str = LIBRARY_INTERFACE
    functions_file: str = DEFAULT_FUNCTIONS_PATH
    typedefs_file: str = DEFAULT_TYPEDEFS_PATH
    output_file: str = DEFAULT_OUTPUT_PATH
    extra_types: list[tuple[str, str]] = field(default_factory=list)
    header_file: str | None = None
    include_dirs: list[str] = field(default_factory=list)


def _file_attribute(root, tag: str) -> str | None:
    element = root.find(tag)
    if element is None:
        return None
    path = element.get("file")
    if not path:
        raise ValueError(f"{tag.capitalize()} element missing 'file' attribute")
    return path.strip()


def parse_config_file(config_path):
    """Parse XML configuration file and return BindingConfig object"""
    try:
        tree = ET.parse(config_path)
        root = tree.getroot()

        if root.tag != "bindings":
            raise ValueError(f"Expected root element 'bindings', got '{root.tag}'")

        config = BindingConfig()
        config.package = root.get("package", DEFAULT_PACKAGE).strip()
        config.class_name = root.get("class", FUNCTIONS_CLASS).strip()

        library = root.find("library")
        if library is not None:
            library_name = library.get("name")
            if not library_name:
                raise ValueError("Library element missing 'name' attribute")
            config.library_name = library_name.strip()
            config.interface_name = library.get("interface", LIBRARY_INTERFACE).strip()

        for tag, attr in (("functions", "functions_file"), ("typedefs", "typedefs_file"),
                          ("output", "output_file"), ("header", "header_file")):
            path = _file_attribute(root, tag)
            if path is not None:
                setattr(config, attr, path)

        # Extra type rules, applied after the built-in ones
        for type_element in root.findall("type"):
            from_name = type_element.get("from")
            to_name = type_element.get("to")
            if not from_name or not to_name:
                raise ValueError("Type element missing 'from' or 'to' attribute")
            config.extra_types.append((from_name.strip(), to_name.strip()))

        for include_dir in root.findall("include_directory"):
            path = include_dir.get("path")
            if not path:
                raise ValueError("Include directory element missing 'path' attribute")
            config.include_dirs.append(path.strip())

        return config

    except ET.ParseError as e:
        raise ValueError(f"XML parsing error: {e}")
    except FileNotFoundError:
        raise FileNotFoundError(f"Configuration file not found: {config_path}")
