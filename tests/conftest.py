"""
Pytest configuration and fixtures
"""

import pytest
from pathlib import Path


@pytest.fixture
def temp_dir(tmp_path):
    """Provide a temporary directory for config and output files"""
    return tmp_path


@pytest.fixture
def typedef_lines():
    """Typedef lines as produced by the extraction step"""
    return [
        "typedef int64 TimestampTz;",
        "typedef uint32 interval_t;",
        "typedef struct Temporal Temporal;",
        "typedef TimestampTz Timestamp2;",
        "",
    ]


@pytest.fixture
def declaration_lines():
    """Function declaration lines as produced by the extraction step"""
    return [
        "extern bool meos_initialize(const char *tz_str);",
        "extern void meos_finish(void);",
        "",
        "extern Temporal *temporal_simplify(const Temporal *temp, double eps_dist, bool synchronized);",
        "extern char *text_out(const text *txt);",
        "extern TimestampTz pg_timestamptz_in(const char *str, int32 typmod);",
        "extern int tbool_values(const Temporal *temp, bool **values);",
    ]


@pytest.fixture
def input_files(tmp_path, typedef_lines, declaration_lines):
    """Write the typedef and declaration fixtures to tmp/types.h and tmp/functions.h"""
    input_dir = tmp_path / "tmp"
    input_dir.mkdir()

    functions_file = input_dir / "functions.h"
    functions_file.write_text("\n".join(declaration_lines) + "\n")

    typedefs_file = input_dir / "types.h"
    typedefs_file.write_text("\n".join(typedef_lines) + "\n")

    return {
        'functions': str(functions_file),
        'typedefs': str(typedefs_file),
        'output': str(tmp_path / "functions.java"),
    }


@pytest.fixture
def meos_header(tmp_path):
    """Create a small MEOS-like header for extraction"""
    header = tmp_path / "meos.h"
    header.write_text("""
typedef int int32;
typedef long long int64;
typedef struct Temporal Temporal;

extern void meos_finish(void);
extern int32 add_values(int32 a, int32 b);
Temporal *temporal_copy(const Temporal *temp);
extern int format_values(const char *fmt, ...);
extern void meos_finish(void);
""")
    return str(header)
