"""Cascade resolution of table documents."""

from .cascade_resolver import CascadeResolver, ResolvedCell, ResolvedTable, resolve_table

__all__ = ["CascadeResolver", "ResolvedCell", "ResolvedTable", "resolve_table"]
