#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""

──────────────────────────────────────────────────────────────────────────────
CLI QUICK START (copy–paste, then tweak)
──────────────────────────────────────────────────────────────────────────────
Typical use:

    mesh2vtk my_file.msht 104 -o my_output

Extract only the 'Total' energy and time groups:

    mesh2vtk /path/to/file.msht 104 --total

Exclude voxel errors in the output:

    mesh2vtk /path/to/file.msht 104 --no-error

Filter energy/time groups by index:

    mesh2vtk /path/to/file.msht 104 \
        --energy 0 2 6 \
        --time 1 total

Filter energy/time groups by value (MeV/shakes):

    mesh2vtk /path/to/file.msht 104 \
        --energy 1.0 20.0 1e2 \
        --time 1e12 total \
        --absolute

Output VTK in the old ASCII file format:

    mesh2vtk /path/to/file.msht 104 --format legacy-ascii

Notes:

    Filters never abort a conversion. Values that cannot be parsed are
    ignored, and a filter that selects nothing falls back to all groups with
    a warning.

    Reading meshtal files and writing VTK is done by an installed backend
    (entry point group 'mesh2vtk.backends'), picked with --backend when more
    than one is installed.

"""


import argparse
import sys
import logging
from typing import List, Optional

from .backends import BackendError, load_backend
from .converter import init_converter
from .naming import DEFAULT_STEM, output_path
from .options import (
    ByteOrder,
    Compressor,
    VtkFormat,
    parse_byte_order,
    parse_compressor,
    parse_format,
)

logger = logging.getLogger("mesh2vtk")


def setup_logging(verbose: int = 0, quiet: bool = False) -> None:
    """
    Configure global logging.

    Args:
        verbose: 0 for INFO, 1 for DEBUG, 2+ for DEBUG with logger names shown.
        quiet: suppress all log output, overrules verbose.
    """

    if quiet:
        level = logging.CRITICAL + 1
    elif verbose > 0:
        level = logging.DEBUG
    else:
        level = logging.INFO

    if verbose > 1:
        fmt = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    else:
        fmt = "%(asctime)s | %(levelname)-8s | %(message)s"

    logging.basicConfig(level=level, format=fmt, datefmt="%H:%M:%S")
    logger.setLevel(level)


MAX_RESOLUTION = 255

FILTER_OPTIONS = {"-e": "--energy", "--energy": "--energy", "-t": "--time", "--time": "--time"}


def resolution_value(val: str) -> int:
    try:
        iv = int(val)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid integer value: {val}")
    if not 1 <= iv <= MAX_RESOLUTION:
        raise argparse.ArgumentTypeError(f"Invalid value: {val}. Must be within [1, {MAX_RESOLUTION}].")
    return iv


def _is_number(token: str) -> bool:
    try:
        float(token)
    except ValueError:
        return False
    return True


def join_filter_values(argv: List[str]) -> List[str]:
    """
    Pass every --energy/--time value to its option as a single '--opt=...' token.

    argparse takes '-1e12' for an option flag, so negative times in exponent
    form would otherwise never reach --time.
    """
    joined = []
    i = 0
    while i < len(argv):
        token = argv[i]
        if token == "--":
            joined.extend(argv[i:])
            break

        if token in FILTER_OPTIONS:
            values = []
            j = i + 1
            while j < len(argv) and argv[j] != "--" and (not argv[j].startswith("-") or _is_number(argv[j])):
                values.append(argv[j])
                j += 1
            if values:
                joined.append(f"{FILTER_OPTIONS[token]}={' '.join(values)}")
                i = j
                continue

        joined.append(token)
        i += 1
    return joined


def split_tokens(values: Optional[List[str]]) -> List[str]:
    """Flatten filter values, so '--energy "0 2 6"' is the same as '--energy 0 2 6'."""
    if not values:
        return []
    return [token for value in values for token in value.split()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mesh2vtk",
        usage="mesh2vtk <file> <id> [options]",
        description="Generalised conversion of meshtal files to visual toolkit formats",
        epilog="Note: --help shows more information and examples",
    )

    # Required inputs
    parser.add_argument("file", help="Path to input meshtal file")
    parser.add_argument("number", type=int, help="Mesh tally identifier, e.g. 104 for FMESH104:n")

    mesh = parser.add_argument_group("Mesh options")
    mesh.add_argument("--total", action="store_true", help="Only extract 'Total' energy/time groups. Same as '--energy total --time total'.")
    mesh.add_argument("--no-error", action="store_true", help="Exclude error mesh from output files to reduce the file size.")
    mesh.add_argument("-s", "--scale", type=float, default=None, metavar="num", help="Multiply all results by a constant. Errors are relative and unchanged.")
    mesh.add_argument("-e", "--energy", nargs="+", default=[], metavar="list", help="Filter energy group(s) by index. Any combination of positive integers and 'total'.")
    mesh.add_argument("-t", "--time", nargs="+", default=[], metavar="list", help="Filter time group(s) by index. Any combination of positive integers and 'total'.")
    mesh.add_argument("-a", "--absolute", action="store_true", help="Interpret --energy/--time values as MeV/shakes rather than group index.")

    vtk = parser.add_argument_group("Vtk options")
    vtk.add_argument("-o", "--output", default=DEFAULT_STEM, metavar="name", help="Name of output file (excl. extension). Mesh id and extension are appended.")
    vtk.add_argument("-f", "--format", type=parse_format, default=VtkFormat.XML, metavar="fmt", help="VTK output format: xml (default), legacy-ascii, legacy-binary.")
    vtk.add_argument("--resolution", type=resolution_value, default=None, metavar="res", help="Angular resolution multiplier for cylindrical meshes, 1 to 255. Large values increase file size.")
    vtk.add_argument("--endian", type=parse_byte_order, default=ByteOrder.BIG_ENDIAN, metavar="end", help="Byte ordering: big-endian (default), little-endian.")
    vtk.add_argument("--compressor", type=parse_compressor, default=Compressor.LZMA, metavar="cmp", help="Compression method for xml: lzma (default), lz4, zlib, none.")
    vtk.add_argument("--backend", default=None, metavar="name", help="Reader/writer backend to use when several are installed.")

    # Utility flags
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Verbose logging (-v, -vv).")
    parser.add_argument("-q", "--quiet", action="store_true", help="Suppress all log output (overrules --verbose).")

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    args = parser.parse_args(join_filter_values(list(argv)))

    args.energy = split_tokens(args.energy)
    args.time = split_tokens(args.time)

    if args.total and (args.energy or args.time):
        parser.error("--total cannot be used with --energy or --time")

    return args


def run(args: argparse.Namespace, backend) -> None:
    """Read, filter and write one mesh with the given backend."""

    logger.info("Reading %s", args.file)
    mesh = backend.read(args.file, args.number, not args.quiet)
    logger.debug("Mesh summary\n%s", mesh)

    logger.debug("Initialising converter")
    config = init_converter(mesh, args)

    path = output_path(args.output, mesh.id, mesh.geometry, args.format)

    logger.info("Writing VTK to %s", path)
    backend.write(mesh, config, path, args.format)


def main(argv: Optional[List[str]] = None, backend=None) -> None:

    """
    Parse CLI args and run the conversion.
    """

    args = parse_args(argv)

    # Configure logging early
    setup_logging(args.verbose, args.quiet)

    if backend is None:
        try:
            backend = load_backend(args.backend)
        except BackendError as e:
            logger.error("%s", e)
            raise SystemExit(2)

    try:
        run(args, backend)
    except Exception as e:
        logger.exception("FATAL: Unexpected error: %s", e)
        raise


if __name__ == "__main__":
    main()
