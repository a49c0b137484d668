#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""

Energy/time group values.

A ``Group`` is either the aggregate 'Total' bin or a physical value along the
energy (MeV) or time (shakes) axis. Groups order by value, with Total always
sorting last, matching the position of the Total bin in a mesh.

"""

from __future__ import annotations

import math
from functools import total_ordering
from typing import Optional


@total_ordering
class Group:
    """Either ``Group.total()`` or ``Group.value(x)``."""

    __slots__ = ("_value",)

    def __init__(self, value: Optional[float] = None):
        # None marks the Total group
        if value is not None:
            value = float(value)
            if math.isnan(value):
                raise ValueError("Group value cannot be NaN")
        self._value = value

    @classmethod
    def total(cls) -> "Group":
        return cls(None)

    @classmethod
    def value(cls, x: float) -> "Group":
        return cls(x)

    @property
    def is_total(self) -> bool:
        return self._value is None

    @property
    def number(self) -> Optional[float]:
        """The physical value, or None for the Total group."""
        return self._value

    def _key(self):
        return (1, 0.0) if self._value is None else (0, self._value)

    def __eq__(self, other):
        if not isinstance(other, Group):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other):
        if not isinstance(other, Group):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return "Group.total()" if self.is_total else f"Group.value({self._value!r})"

    def __str__(self):
        return "Total" if self.is_total else f"{self._value:.5e}"
