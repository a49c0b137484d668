#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""

Output file naming.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Tuple, Union

from .options import Geometry, VtkFormat

logger = logging.getLogger("mesh2vtk")

DEFAULT_STEM = "fmesh"

# (legacy format?, geometry) -> extension
EXTENSIONS: Dict[Tuple[bool, Geometry], str] = {
    (False, Geometry.RECTANGULAR): "vtr",
    (False, Geometry.CYLINDRICAL): "vtu",
    (True, Geometry.RECTANGULAR): "vtk",
    (True, Geometry.CYLINDRICAL): "vtk",
}


def output_path(
    base: Union[str, Path],
    tally_id: int,
    geometry: Geometry,
    fmt: VtkFormat = VtkFormat.XML,
) -> Path:
    """
    Sanitise the output name given and append the mesh tally id.

    Any extension on ``base`` is replaced by the one matching the format and
    geometry. Directories in ``base`` are kept.

    Example:
        >>> output_path("results/fmesh.vtk", 104, Geometry.RECTANGULAR)
        PosixPath('results/fmesh_104.vtr')
    """
    path = Path(base)

    stem = path.stem or DEFAULT_STEM
    logger.debug("Found the name '%s'", stem)

    extension = EXTENSIONS[(fmt.is_legacy, geometry)]
    logger.debug("Set extension to '%s'", extension)

    parent = path.parent if path.name else path
    path = parent / f"{stem}_{tally_id}.{extension}"
    logger.debug("File %s", path.name)
    return path
