"""Check a walker configuration against one concrete schema.

A walker is schema independent, so overrides cannot be checked when it is
built.  ``Walker.validate(descriptor)`` runs these checks on demand and
reports every problem at once.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Set

from .core import ConfigurationError, FieldDescriptor, StructureDescriptor
from .paths import split_path

if TYPE_CHECKING:
    from .walker import Walker


def find_field(descriptor: StructureDescriptor, path: str) -> Optional[FieldDescriptor]:
    """Follow *path* from *descriptor*; map entries expose ``key`` / ``value``."""
    current: Optional[StructureDescriptor] = descriptor
    found: Optional[FieldDescriptor] = None
    for segment in split_path(path):
        if current is None:
            return None
        found = current.field_by_name(segment)
        if found is None:
            return None
        current = found.message
    return found


def reachable_type_names(descriptor: StructureDescriptor) -> Set[str]:
    """Full names of every structure reachable from *descriptor* (cycles ok)."""
    seen: Set[str] = set()
    stack: List[StructureDescriptor] = [descriptor]
    while stack:
        current = stack.pop()
        if current.full_name in seen:
            continue
        seen.add(current.full_name)
        for fd in current.fields:
            if fd.message is not None:
                stack.append(fd.message)
    return seen


def validate_against(walker: 'Walker', descriptor: StructureDescriptor) -> None:
    problems: List[str] = []

    for path in walker.resolver.path_overrides:
        if find_field(descriptor, path) is None:
            problems.append(f"path override {path!r} matches no field")

    for path in walker.guard.overrides:
        fd = find_field(descriptor, path)
        if fd is None:
            problems.append(f"depth override {path!r} matches no field")
        elif not fd.kind.is_structure:
            problems.append(f"depth override {path!r} targets a {fd.kind.name} field")

    if walker.resolver.type_overrides:
        known = reachable_type_names(descriptor)
        for name in walker.resolver.type_overrides:
            if name not in known:
                problems.append(f"type override {name!r} is not used by {descriptor.full_name}")

    if problems:
        raise ConfigurationError("; ".join(problems))
