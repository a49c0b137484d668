#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""

Reader/writer backends.

Reading meshtal files and writing VTK files live outside this package. A
backend is any object with:

    read(path, tally_id, progress) -> mesh
    write(mesh, config, path, fmt) -> None

and is registered by its distribution under the ``mesh2vtk.backends`` entry
point group, e.g. in its pyproject.toml:

    [project.entry-points."mesh2vtk.backends"]
    ntools = "ntools_mesh2vtk:backend"

"""

from __future__ import annotations

import logging
from importlib.metadata import entry_points
from typing import Optional

logger = logging.getLogger("mesh2vtk")

ENTRY_POINT_GROUP = "mesh2vtk.backends"


class BackendError(RuntimeError):
    """No usable reader/writer backend."""


def available_backends():
    """Installed backend entry points, keyed by name."""
    eps = entry_points()
    if hasattr(eps, "select"):
        found = eps.select(group=ENTRY_POINT_GROUP)
    else:
        found = eps.get(ENTRY_POINT_GROUP, [])
    return {ep.name: ep for ep in found}


def load_backend(name: Optional[str] = None):
    """
    Load a backend by name, or the only installed one when no name is given.

    Raises:
        BackendError when nothing matches or the choice is ambiguous.
    """
    backends = available_backends()

    if not backends:
        raise BackendError(
            f"No mesh reader/writer backend installed (entry point group '{ENTRY_POINT_GROUP}')"
        )

    if name is None:
        if len(backends) > 1:
            raise BackendError(f"Several backends installed, choose one with --backend: {sorted(backends)}")
        name = next(iter(backends))

    if name not in backends:
        raise BackendError(f"Unknown backend '{name}', installed: {sorted(backends)}")

    logger.debug("Using backend '%s'", name)
    backend = backends[name].load()

    for method in ("read", "write"):
        if not callable(getattr(backend, method, None)):
            raise BackendError(f"Backend '{name}' has no {method}() method")

    return backend
