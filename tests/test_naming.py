"""
Unit tests for output file naming.

"""

from pathlib import Path

import pytest
from mesh2vtk.naming import EXTENSIONS, output_path
from mesh2vtk.options import Geometry, VtkFormat


# ──────────────────────────────────────────────────────────────
# Extensions
# ──────────────────────────────────────────────────────────────

def test_xml_rectangular():
    assert output_path("fmesh", 104, Geometry.RECTANGULAR, VtkFormat.XML) == Path("fmesh_104.vtr")


def test_xml_cylindrical():
    assert output_path("fmesh", 104, Geometry.CYLINDRICAL, VtkFormat.XML) == Path("fmesh_104.vtu")


@pytest.mark.parametrize("fmt", [VtkFormat.LEGACY_ASCII, VtkFormat.LEGACY_BINARY])
@pytest.mark.parametrize("geometry", list(Geometry))
def test_legacy_any_geometry(fmt, geometry):
    assert output_path("fmesh", 104, geometry, fmt) == Path("fmesh_104.vtk")


def test_table_is_exhaustive():
    for fmt in VtkFormat:
        for geometry in Geometry:
            assert (fmt.is_legacy, geometry) in EXTENSIONS


# ──────────────────────────────────────────────────────────────
# Base names
# ──────────────────────────────────────────────────────────────

def test_extension_replaced():
    assert output_path("my_output.vtk", 7, Geometry.RECTANGULAR) == Path("my_output_7.vtr")


def test_parent_directory_kept():
    assert output_path("results/run1/flux", 14, Geometry.CYLINDRICAL) == Path("results/run1/flux_14.vtu")


def test_empty_base_uses_default_stem():
    assert output_path("", 104, Geometry.RECTANGULAR) == Path("fmesh_104.vtr")
