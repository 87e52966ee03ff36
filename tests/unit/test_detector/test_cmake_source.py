"""Tests for the CMake evidence source."""

from collections.abc import Callable
from pathlib import Path

import pytest

from stdprobe.detector.sources.cmake import CMakeSource
from stdprobe.models.standard import CxxStandard, EvidenceSource


class TestCMakeSource:
    """Tests for CMakeSource."""

    @pytest.fixture
    def source(self) -> CMakeSource:
        """Create source instance."""
        return CMakeSource()

    def test_default_file_name(self, source: CMakeSource) -> None:
        """Test the default project file name."""
        assert source.file_name == "CMakeLists.txt"
        assert source.source == EvidenceSource.CMAKE

    def test_standard_variable(
        self, source: CMakeSource, temp_dir: Path, write_cmake: Callable[[Path, str], Path]
    ) -> None:
        """Test set(CMAKE_CXX_STANDARD NN)."""
        path = write_cmake(
            temp_dir,
            "cmake_minimum_required(VERSION 3.20)\n"
            "project(demo CXX)\n"
            "set(CMAKE_CXX_STANDARD 17)\n"
            "set(CMAKE_CXX_STANDARD_REQUIRED ON)\n",
        )

        assert source.extract(path) == (CxxStandard.CXX17, "CMAKE_CXX_STANDARD 17")

    def test_compile_feature(
        self, source: CMakeSource, temp_dir: Path, write_cmake: Callable[[Path, str], Path]
    ) -> None:
        """Test target_compile_features(... cxx_std_NN)."""
        path = write_cmake(
            temp_dir,
            "add_library(core core.cpp)\n"
            "target_compile_features(core PUBLIC cxx_std_14)\n",
        )

        assert source.extract(path) == (CxxStandard.CXX14, "cxx_std_14")

    def test_cpp_std_property(
        self, source: CMakeSource, temp_dir: Path, write_cmake: Callable[[Path, str], Path]
    ) -> None:
        """Test the c++_std_NN spelling."""
        path = write_cmake(temp_dir, "set(FEATURE c++_std_11)\n")

        assert source.extract(path) == (CxxStandard.CXX11, "c++_std_11")

    def test_variable_beats_compile_feature(
        self, source: CMakeSource, temp_dir: Path, write_cmake: Callable[[Path, str], Path]
    ) -> None:
        """Test the variable assignment is tried before compile features."""
        path = write_cmake(
            temp_dir,
            "target_compile_features(app PRIVATE cxx_std_14)\n"
            "set(CMAKE_CXX_STANDARD 20)\n",
        )

        result = source.extract(path)

        assert result is not None
        assert result[0] is CxxStandard.CXX20

    def test_first_occurrence_of_pattern_wins(
        self, source: CMakeSource, temp_dir: Path, write_cmake: Callable[[Path, str], Path]
    ) -> None:
        """Test the first occurrence of a pattern decides."""
        path = write_cmake(
            temp_dir,
            "target_compile_features(a PRIVATE cxx_std_17)\n"
            "target_compile_features(b PRIVATE cxx_std_23)\n",
        )

        result = source.extract(path)

        assert result is not None
        assert result[0] is CxxStandard.CXX17

    def test_commented_out_standard_ignored(
        self, source: CMakeSource, temp_dir: Path, write_cmake: Callable[[Path, str], Path]
    ) -> None:
        """Test commented-out settings are not evidence."""
        path = write_cmake(
            temp_dir,
            "# set(CMAKE_CXX_STANDARD 11)\n"
            "#[[\n"
            "target_compile_features(app PRIVATE cxx_std_14)\n"
            "]]\n"
            "project(demo)  # cxx_std_17\n",
        )

        assert source.extract(path) is None

    def test_comment_removal_keeps_code(
        self, source: CMakeSource, temp_dir: Path, write_cmake: Callable[[Path, str], Path]
    ) -> None:
        """Test code after a bracket comment is still searched."""
        path = write_cmake(
            temp_dir,
            "#[==[ set(CMAKE_CXX_STANDARD 11) ]==]\n"
            "set(CMAKE_CXX_STANDARD 23) # modern\n",
        )

        assert source.extract(path) == (CxxStandard.CXX23, "CMAKE_CXX_STANDARD 23")

    def test_hash_inside_quoted_argument(
        self, source: CMakeSource, temp_dir: Path, write_cmake: Callable[[Path, str], Path]
    ) -> None:
        """Test a '#' in a quoted argument does not hide the rest of the line."""
        path = write_cmake(temp_dir, 'set(TAG "v1#2") set(CMAKE_CXX_STANDARD 17)\n')

        assert source.extract(path) == (CxxStandard.CXX17, "CMAKE_CXX_STANDARD 17")

    def test_escaped_quote_in_argument(
        self, source: CMakeSource, temp_dir: Path, write_cmake: Callable[[Path, str], Path]
    ) -> None:
        """Test an escaped quote does not end the quoted argument early."""
        path = write_cmake(
            temp_dir,
            'set(MSG "say \\"#hi\\"") set(CMAKE_CXX_STANDARD 20)\n',
        )

        assert source.extract(path) == (CxxStandard.CXX20, "CMAKE_CXX_STANDARD 20")

    def test_bracket_opener_inside_line_comment(
        self, source: CMakeSource, temp_dir: Path, write_cmake: Callable[[Path, str], Path]
    ) -> None:
        """Test '#[[' within a line comment does not open a bracket comment."""
        path = write_cmake(
            temp_dir,
            "# see #[[ notes\n"
            "set(CMAKE_CXX_STANDARD 17)\n"
            "# ]]\n",
        )

        assert source.extract(path) == (CxxStandard.CXX17, "CMAKE_CXX_STANDARD 17")

    def test_unknown_version_falls_to_next_pattern(
        self, source: CMakeSource, temp_dir: Path, write_cmake: Callable[[Path, str], Path]
    ) -> None:
        """Test an unsupported version token does not stop the search."""
        path = write_cmake(
            temp_dir,
            "set(CMAKE_CXX_STANDARD 42)\n"
            "target_compile_features(app PRIVATE cxx_std_17)\n",
        )

        assert source.extract(path) == (CxxStandard.CXX17, "cxx_std_17")

    def test_no_standard(
        self, source: CMakeSource, temp_dir: Path, write_cmake: Callable[[Path, str], Path]
    ) -> None:
        """Test a project file without any standard."""
        path = write_cmake(temp_dir, "project(demo C)\nadd_executable(demo main.c)\n")

        assert source.extract(path) is None

    def test_empty_file(
        self, source: CMakeSource, temp_dir: Path, write_cmake: Callable[[Path, str], Path]
    ) -> None:
        """Test an empty project file."""
        path = write_cmake(temp_dir, "")

        assert source.extract(path) is None

    def test_unreadable_file(self, source: CMakeSource, temp_dir: Path) -> None:
        """Test undecodable content yields no evidence."""
        path = temp_dir / "CMakeLists.txt"
        path.write_bytes(b"\xff\xfeset(CMAKE_CXX_STANDARD 17)")

        assert source.extract(path) is None
