#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""

─────────────────────────────────────────────────────────────
Example Usage of mesh2vtk
─────────────────────────────────────────────────────────────

This script shows how energy/time group filters resolve
against a mesh, without reading or writing any files.

Features demonstrated:
1. Filtering by group index and by physical value
2. The 'total' keyword and the --total shortcut
3. Fallback to all groups when a filter selects nothing
4. Output naming for each VTK format

─────────────────────────────────────────────────────────────

"""

from typing import List

from mesh2vtk import Mesh, output_path, resolve_targets
from mesh2vtk.options import Geometry, VtkFormat

# ──────────────────────────────────────────────────────────────
# Configuration
# ──────────────────────────────────────────────────────────────

ENERGY_EDGES = [0.0, 0.1, 1.0, 20.0]  # MeV

TIME_EDGES = [0.0, 1e12, 1e13]  # shakes

FILTERS = [
    dict(),
    dict(energy=["0", "2"], time=["total"]),
    dict(energy=["1.0", "total"], absolute=True),
    dict(energy=["not-a-number"]),
    dict(total=True),
]


# ──────────────────────────────────────────────────────────────
# Helper Functions
# ──────────────────────────────────────────────────────────────


def print_resolution(label: str, indices: List[int], reason):

    print(f"  {label:<6}: {indices}")
    if reason:
        print(f"          ⚠️ {reason}")


# ──────────────────────────────────────────────────────────────
# Main Example Workflow
# ──────────────────────────────────────────────────────────────

def main():

    print("=== mesh2vtk Example Usage ===\n")

    mesh = Mesh(104, Geometry.RECTANGULAR, emesh=ENERGY_EDGES, tmesh=TIME_EDGES)
    print(mesh, "\n")

    for options in FILTERS:
        print(f"🔹 Filter {options or '(none)'}")
        energy, time = resolve_targets(mesh, **options)
        print_resolution("energy", list(energy.indices), energy.fallback_reason)
        print_resolution("time", list(time.indices), time.fallback_reason)

    print("\nOutput names:")
    for fmt in VtkFormat:
        for geometry in Geometry:
            print(f"  {fmt.value:<14} {geometry.value:<12} -> {output_path('fmesh', mesh.id, geometry, fmt)}")


# ──────────────────────────────────────────────────────────────
# Entry Point
# ──────────────────────────────────────────────────────────────

if __name__ == "__main__":
    main()
