"""
Keyset ("infinite scroll") pagination for tracker list views.

The next page of rows is selected with a predicate built from the last row of
the previous page instead of an offset, so rows inserted while a user scrolls
never shift the page boundaries.

    last = environment.bugs.filter(number=request.query_params.get("last")).first()
    bugs = scroll(environment.bugs.all(), "latest_occurrence", "DESC", last, key="number")

When the sort column is not globally unique, pass a unique ``key`` so rows
that tie on the sort column are neither skipped nor repeated at a page
boundary.
"""

import enum
import operator
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Protocol, runtime_checkable

from django.conf import settings
from django.core.exceptions import FieldDoesNotExist
from django.db.models import Q

from tracker.exceptions import FieldNotFound, InvalidSortDirection

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class SortDirection(str, enum.Enum):
    """Sort direction of a paginated column."""

    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def parse(cls, value):
        """Parse ``value`` case-insensitively, raising InvalidSortDirection otherwise."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        raise InvalidSortDirection(value)

    @property
    def lookup(self):
        return "gt" if self is SortDirection.ASC else "lt"

    @property
    def operator(self):
        return ">" if self is SortDirection.ASC else "<"

    @property
    def ordering_prefix(self):
        return "" if self is SortDirection.ASC else "-"

    def compare(self, value, other):
        return operator.gt(value, other) if self is SortDirection.ASC else operator.lt(value, other)


@runtime_checkable
class FieldAccessor(Protocol):
    """
    Structural interface for records that know how to read their own fields.

    ``get_field`` should raise FieldNotFound for names it does not know.
    """

    def get_field(self, name: str) -> Any: ...


def bare_field(path):
    """
    Return the unqualified field name of ``path`` ("bugs.number" -> "number").

    Raises FieldNotFound when ``path`` is not a dotted list of identifiers.
    """
    if not isinstance(path, str) or not path:
        raise FieldNotFound(path)
    segments = path.split(".")
    if not all(_IDENTIFIER.match(segment) for segment in segments):
        raise FieldNotFound(path)
    return segments[-1]


def orm_lookup(path):
    """Translate a dotted field path into a Django lookup path."""
    bare_field(path)
    return path.replace(".", "__")


def read_field(record, name):
    """Read field ``name`` from a record, whatever shape the record has."""
    if isinstance(record, FieldAccessor):
        try:
            return record.get_field(name)
        except (KeyError, AttributeError):
            raise FieldNotFound(name, record) from None

    if isinstance(record, Mapping):
        try:
            return record[name]
        except KeyError:
            raise FieldNotFound(name, record) from None

    meta = getattr(record, "_meta", None)
    if meta is not None and hasattr(meta, "get_field"):
        # Model instance: only concrete fields are sortable columns.
        try:
            field = meta.get_field(name)
        except FieldDoesNotExist:
            raise FieldNotFound(name, record) from None
        if not getattr(field, "concrete", False):
            raise FieldNotFound(name, record)
        return getattr(record, field.attname)

    try:
        return getattr(record, name)
    except AttributeError:
        raise FieldNotFound(name, record) from None


@dataclass(frozen=True)
class PaginationClause:
    """
    Predicate selecting the rows that come after a reference row.

    The same predicate can be handed to the ORM (``as_q``), embedded in raw
    SQL (``as_sql``) or evaluated against in-memory records (``matches``).
    """

    column: str
    direction: SortDirection
    last_value: Any
    key: Optional[str] = None
    last_key: Any = None

    def as_q(self):
        lookup = orm_lookup(self.column)
        clause = Q(**{f"{lookup}__{self.direction.lookup}": self.last_value})
        if self.key is not None:
            clause |= Q(
                **{
                    lookup: self.last_value,
                    f"{orm_lookup(self.key)}__{self.direction.lookup}": self.last_key,
                }
            )
        return clause

    def as_sql(self):
        """Return ``(sql, params)`` using DB-API ``%s`` placeholders."""
        op = self.direction.operator
        if self.key is None:
            return f"{self.column} {op} %s", [self.last_value]
        return (
            f"({self.column} {op} %s OR ({self.column} = %s AND {self.key} {op} %s))",
            [self.last_value, self.last_value, self.last_key],
        )

    def matches(self, record):
        value = read_field(record, bare_field(self.column))
        if self.direction.compare(value, self.last_value):
            return True
        if self.key is None:
            return False
        return value == self.last_value and self.direction.compare(
            read_field(record, bare_field(self.key)), self.last_key
        )


def infinite_scroll_clause(column, direction, last, key=None):
    """
    Build the clause that loads the page of rows following ``last``.

    Args:
        column: Column the rows are sorted by, optionally qualified
            ("bugs.latest_occurrence").
        direction: "ASC" or "DESC" (any case) or a SortDirection.
        last: The last row of the previous page.
        key: Optional globally unique column used to break ties on ``column``.

    Returns:
        A PaginationClause.

    Raises:
        InvalidSortDirection: ``direction`` is neither ASC nor DESC.
        FieldNotFound: ``column`` or ``key`` is malformed or missing from ``last``.
    """
    direction = SortDirection.parse(direction)
    last_value = read_field(last, bare_field(column))
    last_key = None
    if key is not None:
        last_key = read_field(last, bare_field(key))
    return PaginationClause(column, direction, last_value, key, last_key)


def scroll(queryset, column, direction, last=None, key=None, limit=None):
    """
    Order ``queryset`` by ``column`` (then ``key``) and return one page of it.

    The first page is requested by passing ``last=None``.
    """
    direction = SortDirection.parse(direction)
    ordering = [direction.ordering_prefix + orm_lookup(column)]
    if key is not None:
        ordering.append(direction.ordering_prefix + orm_lookup(key))
    queryset = queryset.order_by(*ordering)

    if last is not None:
        queryset = queryset.filter(infinite_scroll_clause(column, direction, last, key).as_q())

    if limit is None:
        limit = getattr(settings, "INFINITE_SCROLL_PAGE_SIZE", 50)
    return queryset[:limit]
