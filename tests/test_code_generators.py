"""
Unit tests for CodeGenerator and OutputBuilder
"""

from java_binding_generator.code_generators import CodeGenerator, OutputBuilder, remove_semicolon
from java_binding_generator.signature import SignatureParser


class TestCodeGenerator:
    """Test the CodeGenerator class"""

    def setup_method(self):
        """Set up test fixtures"""
        self.generator = CodeGenerator()
        self.parser = SignatureParser()

    def _function(self, line):
        return self.generator.generate_function(line, self.parser.parse(line))

    def test_generate_declaration(self):
        """Test interface declarations are the rewritten line"""
        assert self.generator.generate_declaration("void meos_finish();") == "void meos_finish();"

    def test_generate_returning_function(self):
        """Test a forwarding method returning the native result"""
        result = self._function("boolean meos_initialize(byte[] tz_str);")

        assert result == (
            "public static boolean meos_initialize(byte[] tz_str) {\n"
            "    return MeosLibrary.meos.meos_initialize(tz_str);\n"
            "}"
        )

    def test_generate_void_function(self):
        """Test a void forwarding method performs a bare call"""
        result = self._function("void meos_finish();")

        assert result == (
            "public static void meos_finish() {\n"
            "    MeosLibrary.meos.meos_finish();\n"
            "}"
        )
        assert "return" not in result

    def test_generate_function_with_parameters(self):
        """Test parameters are forwarded in order"""
        result = self._function("Pointer temporal_simplify(Pointer temp, double eps_dist, boolean synchronize);")

        assert "public static Pointer temporal_simplify(Pointer temp, double eps_dist, boolean synchronize) {" in result
        assert "return MeosLibrary.meos.temporal_simplify(temp, eps_dist, synchronize);" in result

    def test_custom_library(self):
        """Test the interface and library handle names are configurable"""
        generator = CodeGenerator(library_name="mylib", interface_name="MyLibrary")
        line = "int add(int a, int b);"
        result = generator.generate_function(line, self.parser.parse(line))

        assert "return MyLibrary.mylib.add(a, b);" in result

    def test_remove_semicolon(self):
        """Test only a trailing semicolon is removed"""
        assert remove_semicolon("void f();") == "void f()"
        assert remove_semicolon("void f()") == "void f()"


class TestOutputBuilder:
    """Test the OutputBuilder class"""

    def test_build_interface(self):
        """Test the interface is bound to the native library"""
        result = OutputBuilder.build_interface(["void meos_finish();"])

        assert result == (
            "public interface MeosLibrary {\n"
            '    functions.MeosLibrary INSTANCE = LibraryLoader.create(functions.MeosLibrary.class).load("meos");\n'
            "    functions.MeosLibrary meos = functions.MeosLibrary.INSTANCE;\n"
            "    void meos_finish();\n"
            "}"
        )

    def test_build_empty(self):
        """Test building with no functions"""
        interface = OutputBuilder.build_interface([])
        result = OutputBuilder.build(interface, [])

        assert result.startswith("package function;\n\nimport jnr.ffi.LibraryLoader;\nimport jnr.ffi.Pointer;\n\n")
        assert "public class functions {\n    public interface MeosLibrary {" in result
        assert result.endswith("    }\n}\n")

    def test_build_nests_interface_and_functions(self):
        """Test the class holds the interface followed by the methods"""
        interface = OutputBuilder.build_interface(["void meos_finish();"])
        function = "public static void meos_finish() {\n    MeosLibrary.meos.meos_finish();\n}"
        result = OutputBuilder.build(interface, [function])

        assert "        void meos_finish();\n    }\n\n    public static void meos_finish() {" in result
        assert "        MeosLibrary.meos.meos_finish();\n    }\n}\n" in result
        assert result.index("public interface MeosLibrary") < result.index("public static void meos_finish()")

    def test_build_custom_names(self):
        """Test package and class names are configurable"""
        interface = OutputBuilder.build_interface([], class_name="Natives", interface_name="Lib", library_name="mylib")
        result = OutputBuilder.build(interface, [], package="org.example", class_name="Natives")

        assert "package org.example;" in result
        assert "public class Natives {" in result
        assert 'Natives.Lib INSTANCE = LibraryLoader.create(Natives.Lib.class).load("mylib");' in result
        assert "Natives.Lib mylib = Natives.Lib.INSTANCE;" in result
