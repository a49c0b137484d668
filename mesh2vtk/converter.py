#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""

Conversion parameters.

Collects the resolved energy/time groups and the remaining VTK options into a
single ``ConversionConfig`` for the external mesh-to-VTK writer. This is the
only place the user's visualization options meet, so it is also where the
interesting ones get reported.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from .options import ByteOrder, Compressor
from .targets import resolve_targets

logger = logging.getLogger("mesh2vtk")


@dataclass(frozen=True)
class ConversionConfig:
    """
    Fully resolved parameters for one mesh conversion.

    ``scale`` is not applied to the mesh beforehand. The writer applies it
    once, e.g. with ``mesh.scale(config.scale)``.
    """

    include_errors: bool = True
    byte_order: ByteOrder = ByteOrder.BIG_ENDIAN
    compressor: Compressor = Compressor.LZMA
    resolution: int = 1
    energy_groups: Tuple[int, ...] = ()
    time_groups: Tuple[int, ...] = ()
    scale: Optional[float] = None

    def __post_init__(self):
        if self.resolution < 1:
            raise ValueError(f"Resolution must be at least 1, got {self.resolution}")


def init_converter(mesh, args) -> ConversionConfig:
    """
    Build the conversion config for a mesh from parsed command line options.

    Args:
        mesh: loaded mesh, see ``mesh2vtk.mesh.Mesh``
        args: namespace with total, absolute, energy, time, no_error, endian,
              compressor, resolution and scale attributes
    """
    energies, times = resolve_targets(
        mesh,
        energy=args.energy or (),
        time=args.time or (),
        total=args.total,
        absolute=args.absolute,
    )

    for resolved in (energies, times):
        if resolved.fell_back:
            logger.warning("%s", resolved.fallback_reason)

    logger.debug("Energy idx %s", list(energies.indices))
    logger.debug("Time idx %s", list(times.indices))

    if args.resolution is not None:
        logger.info("Resolution set to %d", args.resolution)

    if args.no_error:
        logger.info("Excluding error mesh from VTK")

    if args.scale is not None:
        logger.info("Scaling results by %.5e", args.scale)

    return ConversionConfig(
        include_errors=not args.no_error,
        byte_order=args.endian,
        compressor=args.compressor,
        resolution=args.resolution if args.resolution is not None else 1,
        energy_groups=energies.indices,
        time_groups=times.indices,
        scale=args.scale,
    )
