"""
Style algebra for table styles.

Three operations shared by every style record:

- ``equals``: structural, na-aware, recursive equality
- ``inherit``: field-by-field cascade where the child's set fields win
- ``get_style_change``: the part of a child style that differs from its parent

The operations walk dataclass fields generically, so every record type that
derives from :class:`Mergeable` gets them without per-type overloads. ``None``
is the unset marker for every field; a record whose fields are all unset is
treated the same as ``None``.
"""

from __future__ import annotations

from dataclasses import fields
from typing import Any, Optional, TypeVar


T = TypeVar("T")


class Mergeable:
    """Capability shared by style records: equals / inherit / get_style_change."""

    __slots__ = ()

    def equals(self, other: Any) -> bool:
        return equals(self, other)

    def inherit(self: T, parent: Optional[T]) -> Optional[T]:
        return inherit(self, parent)

    def get_style_change(self: T, parent: Optional[T]) -> Optional[T]:
        return get_style_change(self, parent)

    def is_unset(self) -> bool:
        return is_unset(self)


def _is_record(value: Any) -> bool:
    return isinstance(value, Mergeable)


def is_unset(value: Any) -> bool:
    """True for ``None`` and for records whose fields are all unset."""
    if value is None:
        return True
    if _is_record(value):
        return all(is_unset(getattr(value, f.name)) for f in fields(value))
    return False


def equals(a: Any, b: Any) -> bool:
    """
    Na-aware structural equality.

    Unset equals unset, unset never equals a set value, and nested records
    are compared field by field.
    """
    if a is b:
        return True
    if is_unset(a) or is_unset(b):
        return is_unset(a) and is_unset(b)
    if _is_record(a) or _is_record(b):
        if type(a) is not type(b):
            return False
        return all(equals(getattr(a, f.name), getattr(b, f.name)) for f in fields(a))
    return a == b


def inherit(child: Optional[T], parent: Optional[T]) -> Optional[T]:
    """
    Merge ``child`` over ``parent``.

    Every field set on the child wins; unset fields take the parent's value.
    Nested records are merged with the same rule.

    Identity contract: returns ``parent`` itself when the child is wholly
    unset, ``child`` itself when the parent is wholly unset, and ``child``
    itself whenever the merged record ``equals`` the child. A new record is
    only allocated when the parent actually contributes something.
    """
    if is_unset(child):
        return parent
    if is_unset(parent):
        return child
    if not _is_record(child) or type(child) is not type(parent):
        return child

    values = {
        f.name: inherit(getattr(child, f.name), getattr(parent, f.name))
        for f in fields(child)
    }
    merged = type(child)(**values)
    if equals(merged, child):
        return child
    return merged


def get_style_change(child: Optional[T], parent: Optional[T]) -> Optional[T]:
    """
    Strip from ``child`` everything ``parent`` already provides.

    A field is kept only when it differs from the parent's (plain ``==`` per
    leaf value, recursing into nested records). Returns ``None`` for a wholly
    unset child or when nothing differs, and ``child`` itself when the parent
    is unset or every child field survives.
    """
    if is_unset(child):
        return None
    if is_unset(parent):
        return child
    if not _is_record(child):
        return None if child == parent else child
    if type(child) is not type(parent):
        return child

    values = {}
    for f in fields(child):
        change = get_style_change(getattr(child, f.name), getattr(parent, f.name))
        values[f.name] = None if is_unset(change) else change

    if all(value is None for value in values.values()):
        return None
    diff = type(child)(**values)
    if equals(diff, child):
        return child
    return diff
