#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""

Energy/time group target resolution.

Turns the user's --energy/--time filters into the concrete bin indices handed
to the converter. Filters are given either as group indices (default) or as
physical values in MeV/shakes (--absolute), and the word 'total' is accepted
in both modes.

Nothing here raises on a bad filter. Unparseable tokens are dropped, and if a
filter ends up selecting nothing the full range of groups is used instead. The
reason for that fallback travels with the result so the caller decides how to
report it.

"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from .groups import Group

TOTAL_KEYWORD = "total"


@dataclass(frozen=True)
class Resolution:
    """Resolved indices for one dimension, plus why a fallback happened (if it did)."""

    indices: Tuple[int, ...]
    fallback_reason: Optional[str] = None

    @property
    def fell_back(self) -> bool:
        return self.fallback_reason is not None


# ──────────────────────────────────────────────────────────────
# Token parsing
# ──────────────────────────────────────────────────────────────

def is_total(token: str) -> bool:
    return token.strip().lower() == TOTAL_KEYWORD


def has_total(tokens: Iterable[str]) -> bool:
    return any(is_total(t) for t in tokens)


def parse_indices(tokens: Iterable[str]) -> List[int]:
    """
    Parse tokens as non-negative group indices, silently dropping anything else.
    """
    indices = []
    for token in tokens:
        # plain ascii digits only, no sign, padding or '_' separators
        if token.isascii() and token.isdigit():
            indices.append(int(token))
    return indices


def parse_values(tokens: Iterable[str]) -> List[Group]:
    """
    Parse tokens as real energy/time values, silently dropping anything else.

    'total' is not handled here, see ``group_set``.
    """
    groups = []
    for token in tokens:
        try:
            value = float(token)
        except ValueError:
            continue
        if math.isnan(value):
            continue
        groups.append(Group.value(value))
    return groups


def group_set(tokens: Sequence[str]) -> List[Group]:
    """Sorted, deduplicated groups for the tokens, Total appended if requested."""
    groups = parse_values(tokens)
    if has_total(tokens):
        groups.append(Group.total())
    return sorted(set(groups))


# ──────────────────────────────────────────────────────────────
# Resolution
# ──────────────────────────────────────────────────────────────

def _full_range(bin_count: int) -> Tuple[int, ...]:
    return tuple(range(bin_count))


def resolve_indices(tokens: Sequence[str], bin_count: int) -> Resolution:
    """
    Resolve tokens given as group indices.

    No filter selects every group, Total included. Indices beyond the mesh are
    passed through for the converter to deal with.
    """
    if not tokens:
        return Resolution(_full_range(bin_count))

    indices = parse_indices(tokens)
    if has_total(tokens):
        indices.append(bin_count - 1)

    if not indices:
        return Resolution(
            _full_range(bin_count),
            f"Unable to parse indices provided {list(tokens)}, falling back to all groups",
        )

    return Resolution(tuple(sorted(set(indices))))


def resolve_values(
    tokens: Sequence[str],
    bin_count: int,
    lookup: Callable[[Group], int],
    dimension: str = "energy",
) -> Resolution:
    """
    Resolve tokens given as physical values through a mesh lookup.

    Args:
        tokens: raw filter tokens
        bin_count: number of groups in the dimension, including Total
        lookup: maps a Group to its bin index, raising LookupError if none owns it
        dimension: 'energy' or 'time', used in the fallback reason
    """
    if not tokens:
        return Resolution(_full_range(bin_count))

    indices = set()
    for group in group_set(tokens):
        try:
            indices.add(lookup(group))
        except LookupError:
            continue

    if not indices:
        return Resolution(
            _full_range(bin_count),
            f"No valid {dimension} groups in {list(tokens)}, falling back to all groups",
        )

    return Resolution(tuple(sorted(indices)))


def resolve_targets(
    mesh,
    energy: Sequence[str] = (),
    time: Sequence[str] = (),
    total: bool = False,
    absolute: bool = False,
) -> Tuple[Resolution, Resolution]:
    """
    Resolve the energy and time targets for a mesh.

    Returns:
        (energy, time) resolutions.
    """
    n_ebins = mesh.n_ebins()
    n_tbins = mesh.n_tbins()

    if total:
        return Resolution((n_ebins - 1,)), Resolution((n_tbins - 1,))

    if absolute:
        return (
            resolve_values(energy, n_ebins, mesh.energy_index_from_group, "energy"),
            resolve_values(time, n_tbins, mesh.time_index_from_group, "time"),
        )

    return resolve_indices(energy, n_ebins), resolve_indices(time, n_tbins)
