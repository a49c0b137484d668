"""
Unit tests for energy/time group target resolution.

These tests verify that resolution:
1. Selects every group when no filter is given
2. Resolves indices and the 'total' keyword, sorted and deduplicated
3. Resolves physical values through the mesh lookups
4. Falls back to every group, with a reason, when a filter selects nothing
5. Short-circuits to the Total groups with --total

"""

import pytest
from mesh2vtk.groups import Group
from mesh2vtk.mesh import GroupLookupError, Mesh
from mesh2vtk.options import Geometry
from mesh2vtk.targets import Resolution, resolve_indices, resolve_targets, resolve_values

# ──────────────────────────────────────────────────────────────
# Configuration
# ──────────────────────────────────────────────────────────────

# 3 energy bins + Total, 2 time bins + Total
ENERGY_EDGES = [0.0, 0.1, 1.0, 20.0]
TIME_EDGES = [0.0, 1e12, 1e13]


@pytest.fixture
def mesh():
    return Mesh(104, Geometry.RECTANGULAR, emesh=ENERGY_EDGES, tmesh=TIME_EDGES)


# ──────────────────────────────────────────────────────────────
# Index mode
# ──────────────────────────────────────────────────────────────

@pytest.mark.parametrize("n", [1, 2, 5, 30])
def test_index_no_filter_selects_all(n):
    assert resolve_indices([], n) == Resolution(tuple(range(n)))


@pytest.mark.parametrize("n", [1, 4, 10])
def test_index_unparseable_falls_back(n):
    res = resolve_indices(["abc", "-1", "2.5"], n)
    assert res.indices == tuple(range(n))
    assert res.fell_back
    assert "abc" in res.fallback_reason


@pytest.mark.parametrize("token", ["total", "TOTAL", "Total"])
def test_index_total_maps_to_last(token):
    assert resolve_indices([token], 7).indices == (6,)
    assert resolve_indices(["0", token, "2"], 7).indices == (0, 2, 6)


def test_index_sorted_and_unique():
    res = resolve_indices(["5", "1", "5", "3", "1", "total"], 6)
    assert res.indices == (1, 3, 5)
    assert not res.fell_back


def test_index_out_of_range_passed_through():
    assert resolve_indices(["0", "99"], 4).indices == (0, 99)


def test_index_partial_garbage_no_fallback():
    res = resolve_indices(["junk", "2"], 4)
    assert res == Resolution((2,))


def test_index_idempotent():
    tokens = ["3", "total", "x", "0"]
    assert resolve_indices(tokens, 5) == resolve_indices(tokens, 5)


# ──────────────────────────────────────────────────────────────
# Absolute mode
# ──────────────────────────────────────────────────────────────

def test_absolute_value_and_total(mesh):
    res = resolve_values(["total", "1.0"], mesh.n_ebins(), mesh.energy_index_from_group)
    assert res == Resolution((1, 3))


def test_absolute_no_filter_selects_all(mesh):
    assert resolve_values([], 4, mesh.energy_index_from_group).indices == (0, 1, 2, 3)


def test_absolute_failed_lookups_dropped(mesh):
    res = resolve_values(["1e9", "0.05"], mesh.n_ebins(), mesh.energy_index_from_group)
    assert res == Resolution((0,))


def test_absolute_all_lookups_fail_falls_back(mesh):
    res = resolve_values(["1e9", "-4", "bad"], mesh.n_ebins(), mesh.energy_index_from_group, "energy")
    assert res.indices == (0, 1, 2, 3)
    assert "energy" in res.fallback_reason


def test_absolute_same_bin_deduplicated(mesh):
    res = resolve_values(["0.5", "0.9", "1.0"], mesh.n_ebins(), mesh.energy_index_from_group)
    assert res.indices == (1,)


def test_absolute_lookup_queried_in_group_order():
    seen = []

    def lookup(group):
        seen.append(group)
        if group.is_total:
            return 9
        raise GroupLookupError(str(group))

    res = resolve_values(["3", "TOTAL", "1", "3"], 10, lookup)
    assert seen == [Group.value(1.0), Group.value(3.0), Group.total()]
    assert res.indices == (9,)


# ──────────────────────────────────────────────────────────────
# Both dimensions
# ──────────────────────────────────────────────────────────────

def test_targets_default(mesh):
    energy, time = resolve_targets(mesh)
    assert energy.indices == (0, 1, 2, 3)
    assert time.indices == (0, 1, 2)


def test_targets_total_overrides_filters(mesh):
    energy, time = resolve_targets(mesh, energy=["0"], time=["1e12"], total=True, absolute=True)
    assert energy == Resolution((3,))
    assert time == Resolution((2,))


def test_targets_index_mode(mesh):
    energy, time = resolve_targets(mesh, energy=["2", "0"], time=["total"])
    assert energy.indices == (0, 2)
    assert time.indices == (2,)


def test_targets_absolute_keeps_dimension_order(mesh):
    energy, time = resolve_targets(mesh, energy=["20.0"], absolute=True)
    assert energy.indices == (2,)
    assert time.indices == (0, 1, 2)


def test_targets_absolute_time(mesh):
    energy, time = resolve_targets(mesh, energy=["total"], time=["5e12", "total"], absolute=True)
    assert energy.indices == (3,)
    assert time.indices == (1, 2)
