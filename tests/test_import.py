"""
Unit tests for mesh2vtk package import.

These tests verify that:
1. The package can be imported without errors
2. The package exposes version metadata and the public API

"""

# ──────────────────────────────────────────────────────────────
# Tests
# ──────────────────────────────────────────────────────────────

def test_import_and_version():
    """Ensure the package loads and __version__ attribute exists."""
    import mesh2vtk
    assert hasattr(mesh2vtk, "__version__")
    assert isinstance(mesh2vtk.__version__, str)


def test_public_api():
    """Ensure the resolution entry points are exported at package level."""
    import mesh2vtk
    for name in ("Group", "Mesh", "resolve_targets", "output_path", "init_converter", "ConversionConfig"):
        assert hasattr(mesh2vtk, name)
