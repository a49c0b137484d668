#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""

In-memory mesh tally model.

This is the interface the target resolution consumes from a mesh reader: bin
counts per dimension, value-to-index lookups, the geometry kind and the tally
identifier. Readers (see ``mesh2vtk.backends``) are expected to hand back a
``Mesh`` or any object exposing the same methods.

Bin layout follows MCNP meshtal output: a dimension with N > 1 bins carries an
extra aggregate 'Total' bin at index N, so it has N + 1 groups. A dimension
with a single bin is the Total group only.

"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import numpy as np

from .groups import Group
from .options import Geometry

logger = logging.getLogger("mesh2vtk")


class GroupLookupError(LookupError):
    """Raised when no bin of a mesh dimension owns the requested group."""


def _as_edges(edges: Sequence[float], name: str) -> np.ndarray:
    arr = np.asarray(edges, dtype=float).ravel()
    if arr.size < 2:
        raise ValueError(f"{name} needs at least two bin edges, got {arr.size}")
    if np.any(np.diff(arr) <= 0):
        raise ValueError(f"{name} bin edges must be strictly increasing")
    return arr


def _group_count(edges: np.ndarray) -> int:
    nbins = edges.size - 1
    return 1 if nbins == 1 else nbins + 1


def _index_from_group(edges: np.ndarray, group: Group, dimension: str) -> int:
    count = _group_count(edges)

    if group.is_total:
        return count - 1

    if count == 1:
        raise GroupLookupError(f"{dimension} mesh has only the Total group, no bin for {group}")

    value = group.number

    # bins own (lower, upper], the lowest edge belongs to the first bin
    if value == edges[0]:
        return 0

    idx = int(np.searchsorted(edges, value, side="left")) - 1
    if idx < 0 or idx >= edges.size - 1:
        raise GroupLookupError(
            f"{dimension} value {value:.5e} outside of mesh bounds [{edges[0]:.5e}, {edges[-1]:.5e}]"
        )

    return idx


class Mesh:
    """
    A single mesh tally.

    Args:
        id: tally number, e.g. 104 for FMESH104:n
        geometry: rectangular or cylindrical
        emesh: ascending energy bin edges (MeV)
        tmesh: ascending time bin edges (shakes); defaults to a single bin
        result: optional results array, any shape
        error: optional relative errors, same shape as ``result``
        particle: tallied particle name, informational only
    """

    def __init__(
        self,
        id: int,
        geometry: Geometry,
        emesh: Sequence[float],
        tmesh: Optional[Sequence[float]] = None,
        result: Optional[np.ndarray] = None,
        error: Optional[np.ndarray] = None,
        particle: str = "neutron",
    ):
        self.id = int(id)
        self.geometry = geometry
        self.particle = particle

        self.emesh = _as_edges(emesh, "Energy")
        self.tmesh = _as_edges(tmesh if tmesh is not None else [-1.0e36, 1.0e36], "Time")

        self.result = None if result is None else np.asarray(result, dtype=float)
        self.error = None if error is None else np.asarray(error, dtype=float)

        if self.result is not None and self.error is not None and self.result.shape != self.error.shape:
            raise ValueError(f"Result shape {self.result.shape} does not match error shape {self.error.shape}")

    def n_ebins(self) -> int:
        """Number of energy groups, including Total."""
        return _group_count(self.emesh)

    def n_tbins(self) -> int:
        """Number of time groups, including Total."""
        return _group_count(self.tmesh)

    def energy_index_from_group(self, group: Group) -> int:
        return _index_from_group(self.emesh, group, "Energy")

    def time_index_from_group(self, group: Group) -> int:
        return _index_from_group(self.tmesh, group, "Time")

    def scale(self, factor: float) -> None:
        """
        Multiply all results by a constant, in place.

        Errors are relative and therefore unchanged.
        """
        if self.result is None:
            logger.debug("Mesh %s has no results to scale", self.id)
            return
        self.result *= factor

    def __str__(self) -> str:
        lines = [
            f"Mesh {self.id} ({self.particle})",
            f"  geometry     : {self.geometry.value}",
            f"  energy groups: {self.n_ebins()} ({self.emesh[0]:.5e} to {self.emesh[-1]:.5e} MeV)",
            f"  time groups  : {self.n_tbins()} ({self.tmesh[0]:.5e} to {self.tmesh[-1]:.5e} shakes)",
        ]
        if self.result is not None:
            lines.append(f"  results      : {self.result.size} values")
        return "\n".join(lines)
