# -*- coding: utf-8 -*-

"""

mesh2vtk: MCNP mesh tally → VTK converter
==========================================

──────────────────────────────────────────────────────────────────────────────
Description
──────────────────────────────────────────────────────────────────────────────
mesh2vtk converts a single MCNP mesh tally into VTK files that ParaView, VisIt
and other VTK-based visualization tools can read, keeping only the energy and
time groups asked for.

──────────────────────────────────────────────────────────────────────────────
WHY THIS EXISTS
──────────────────────────────────────────────────────────────────────────────
- Mesh tallies carry every energy and time group, which makes for very large
  visualization files when only a few groups (often just 'Total') matter.
- Group filters can be given by index or by physical value, and a filter that
  cannot be honoured widens the selection instead of aborting the conversion.

"""

from .groups import Group

from .mesh import (
    GroupLookupError,
    Mesh,
)

from .targets import (
    Resolution,
    resolve_indices,
    resolve_values,
    resolve_targets,
)

from .naming import output_path

from .converter import (
    ConversionConfig,
    init_converter,
)

__version__ = "1.0.7"
