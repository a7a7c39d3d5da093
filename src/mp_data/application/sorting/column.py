"""Application sorting – SortColumn and column-table normalisation."""
from __future__ import annotations

import dataclasses
import re
from typing import Any, Iterable, Mapping, Union

from mp_data.application.sorting.direction import OrderTerm, SortDirection

# Physical ordering for one direction: ordered field terms, or a raw expression.
ColumnOrdering = Union[tuple[OrderTerm, ...], str]

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def humanize(name: str) -> str:
    """``first_name`` / ``firstName`` / ``first-name`` → ``First Name``."""
    words = _CAMEL_BOUNDARY.sub(" ", name).replace("_", " ").replace("-", " ").split()
    return " ".join(word[:1].upper() + word[1:] for word in words)


@dataclasses.dataclass(frozen=True)
class SortColumn:
    """A logical sortable column and the physical ordering behind each direction.

    ``default`` is the direction a sort link applies when the column is not
    currently active.
    """

    name: str
    asc: ColumnOrdering
    desc: ColumnOrdering
    default: SortDirection = SortDirection.ASC
    label: str = ""

    def __post_init__(self) -> None:
        if not self.label:
            object.__setattr__(self, "label", humanize(self.name))

    @classmethod
    def simple(cls, name: str) -> "SortColumn":
        return cls(
            name=name,
            asc=(OrderTerm(name, SortDirection.ASC),),
            desc=(OrderTerm(name, SortDirection.DESC),),
        )

    @classmethod
    def from_definition(cls, name: str, definition: Any) -> "SortColumn":
        """Build a column from a mapping such as::

            {
                "asc": {"first_name": "ASC", "last_name": "ASC"},
                "desc": {"first_name": "DESC", "last_name": "DESC"},
                "default": "DESC",
                "label": "Name",
            }

        Either direction may also be a raw expression string
        (``"last_name ASC NULLS FIRST"``).  A missing ``asc`` or ``desc``
        falls back to ordering by *name* itself in that direction.
        """
        if definition is None:
            return cls.simple(name)
        if isinstance(definition, SortColumn):
            return dataclasses.replace(definition, name=name)
        if not isinstance(definition, Mapping):
            raise TypeError(
                f"Sort column {name!r} definition must be a mapping, got {type(definition).__name__}"
            )

        base = cls.simple(name)
        asc = _ordering(name, definition["asc"]) if "asc" in definition else base.asc
        desc = _ordering(name, definition["desc"]) if "desc" in definition else base.desc
        default = definition.get("default")
        return cls(
            name=name,
            asc=asc,
            desc=desc,
            default=SortDirection.parse(default) if default is not None else SortDirection.ASC,
            label=definition.get("label") or "",
        )

    def ordering(self, direction: SortDirection) -> ColumnOrdering:
        return self.asc if direction is SortDirection.ASC else self.desc


def _ordering(name: str, value: Any) -> ColumnOrdering:
    if isinstance(value, str):
        return value
    if isinstance(value, OrderTerm):
        return (value,)
    if isinstance(value, Mapping):
        return tuple(OrderTerm(str(field), SortDirection.parse(d)) for field, d in value.items())
    if isinstance(value, Iterable):
        terms: list[OrderTerm] = []
        for item in value:
            if isinstance(item, OrderTerm):
                terms.append(item)
            elif isinstance(item, (tuple, list)) and len(item) == 2:
                terms.append(OrderTerm(str(item[0]), SortDirection.parse(item[1])))
            else:
                raise TypeError(f"Sort column {name!r}: cannot read ordering entry {item!r}")
        return tuple(terms)
    raise TypeError(f"Sort column {name!r}: ordering must be a mapping, sequence or string")


def normalize_columns(definitions: Any) -> tuple[SortColumn, ...]:
    """Expand a column declaration into a tuple of :class:`SortColumn`.

    Accepts a mapping ``name -> definition`` or an iterable whose items are
    bare names, :class:`SortColumn` instances or ``{name: definition}``
    mappings.  Later declarations of the same name replace earlier ones but
    keep the first position.
    """
    table: dict[str, SortColumn] = {}
    if isinstance(definitions, Mapping):
        definitions = [definitions]
    for item in definitions:
        if isinstance(item, str):
            table[item] = SortColumn.simple(item)
        elif isinstance(item, SortColumn):
            table[item.name] = item
        elif isinstance(item, Mapping):
            for name, definition in item.items():
                table[str(name)] = SortColumn.from_definition(str(name), definition)
        else:
            raise TypeError(f"Cannot declare sort column from {item!r}")
    return tuple(table.values())


__all__ = ["ColumnOrdering", "SortColumn", "humanize", "normalize_columns"]
