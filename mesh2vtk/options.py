#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""

Option types shared by the command line, the namer and the converter config.

Each enum value is the exact spelling accepted on the command line, so the
argparse ``type=`` callables below can map user text straight onto a member.

"""

from __future__ import annotations

import argparse
from enum import Enum
from typing import Type, TypeVar

E = TypeVar("E", bound=Enum)


class Geometry(Enum):
    """Mesh geometry kind, used only for naming and by the external writer."""

    RECTANGULAR = "rectangular"
    CYLINDRICAL = "cylindrical"


class VtkFormat(Enum):
    XML = "xml"
    LEGACY_ASCII = "legacy-ascii"
    LEGACY_BINARY = "legacy-binary"

    @property
    def is_legacy(self) -> bool:
        return self is not VtkFormat.XML


class ByteOrder(Enum):
    # Visit only reads big endian
    BIG_ENDIAN = "big-endian"
    LITTLE_ENDIAN = "little-endian"


class Compressor(Enum):
    LZMA = "lzma"
    LZ4 = "lz4"
    ZLIB = "zlib"
    NONE = "none"


def _enum_parser(enum_cls: Type[E]):
    """
    Build an argparse ``type=`` callable for an option enum.

    Matching is case-insensitive and underscores are accepted in place of
    hyphens, so 'LEGACY_ASCII' and 'legacy-ascii' are the same format.
    """

    choices = ", ".join(member.value for member in enum_cls)

    def parse(arg: str) -> E:
        text = arg.strip().lower().replace("_", "-")
        try:
            return enum_cls(text)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid choice: '{arg}' (choose from {choices})")

    parse.__name__ = enum_cls.__name__
    return parse


parse_format = _enum_parser(VtkFormat)
parse_byte_order = _enum_parser(ByteOrder)
parse_compressor = _enum_parser(Compressor)
