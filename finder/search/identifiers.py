"""Id string classification and symbolic-name resolution.

Three id forms are accepted:
- ``$name``  literal id, matched verbatim against a node's literal id
- ``#123``   numeric id, parsed as a base-10 signed integer
- ``name``   symbolic resource name, resolved to a numeric id through a
             resource table (the generated ``R.id`` class on Android)
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Callable, Mapping
from pathlib import Path

from pydantic import TypeAdapter

from finder.models import ClassifiedId, IdKind

logger = logging.getLogger("element-finder.search")

LITERAL_PREFIX = "$"
NUMERIC_PREFIX = "#"

# Same grammar as int() minus surrounding whitespace and digit underscores
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

_GROUPS = TypeAdapter(dict[str, dict[str, int]])

NameLookup = Callable[[str], "int | None"]


def classify_id(using: str) -> ClassifiedId:
    """Classify an id string. Total: never raises for any str input."""
    if using.startswith(LITERAL_PREFIX):
        return ClassifiedId(kind=IdKind.LITERAL, literal=using[len(LITERAL_PREFIX):])

    if using.startswith(NUMERIC_PREFIX):
        digits = using[len(NUMERIC_PREFIX):]
        if _INTEGER_RE.fullmatch(digits) is None:
            logger.debug("Malformed numeric id %r, nothing can match", using)
            return ClassifiedId(kind=IdKind.INVALID)
        return ClassifiedId(kind=IdKind.NUMERIC, numeric=int(digits))

    return ClassifiedId(kind=IdKind.SYMBOLIC, name=using)


class ResourceTable:
    """Generated resource ids grouped by kind, e.g. ``{"id": {"title": 2131}}``."""

    def __init__(self, groups: Mapping[str, Mapping[str, int]] | None = None) -> None:
        """Raises pydantic.ValidationError (a ValueError) unless groups maps
        str to {str: int}. Values are not coerced: "5" and true are rejected.
        """
        self._groups: dict[str, dict[str, int]] = _GROUPS.validate_python(
            {
                group: dict(fields) if isinstance(fields, Mapping) else fields
                for group, fields in (groups or {}).items()
            },
            strict=True,
        )

    @classmethod
    def from_json(cls, path: str | Path) -> ResourceTable:
        """Load a table from a JSON file of ``{group: {name: int}}``."""
        data = json.loads(Path(path).read_text())
        if not isinstance(data, dict):
            raise ValueError(f"Resource table {path} must be a JSON object")
        return cls(data)

    def get_field(self, group: str, name: str) -> int | None:
        """Return the value of ``group.name`` or None if it is not defined."""
        return self._groups.get(group, {}).get(name)

    def lookup(self, name: str) -> int | None:
        return self.get_field("id", name)

    def __len__(self) -> int:
        return sum(len(fields) for fields in self._groups.values())


class IdResolver:
    """Resolves symbolic names to numeric ids via an injected lookup.

    ``lookup`` may be any callable returning an int or None, a mapping, or a
    ResourceTable. Exceptions raised by the lookup propagate unchanged.
    """

    def __init__(self, lookup: NameLookup | Mapping[str, int] | ResourceTable | None = None) -> None:
        if lookup is None:
            lookup = ResourceTable()
        if isinstance(lookup, ResourceTable):
            lookup = lookup.lookup
        elif isinstance(lookup, Mapping):
            lookup = lookup.get
        self._lookup: NameLookup = lookup

    def resolve(self, name: str) -> int | None:
        value = self._lookup(name)
        if value is None:
            logger.debug("Symbolic id %r has no resource mapping", name)
        return value
