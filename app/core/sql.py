"""
SQL fragment builders for the CRUD layer.

Two helpers are provided:

- sql_for_partial_update: turns a sparse {field: value} map into a
  `"col1"=$1, "col2"=$2` SET fragment plus the ordered values.
- WhereBuilder: collects optional filter predicates into a
  ` WHERE a AND b` clause plus the ordered values.

Both number placeholders with an explicit running counter so a caller can
append its own parameters (e.g. the primary key) at a known position.
Values are never interpolated into the SQL text.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from app.core.exceptions import InvalidInput


def quote_ident(name: str) -> str:
    """Double-quote an SQL identifier."""
    return '"' + name.replace('"', '""') + '"'


def _field_name(field_id: Union[str, Enum]) -> str:
    # str-mixin enums format as "Cls.MEMBER" on newer interpreters
    if isinstance(field_id, Enum):
        return field_id.value
    return field_id


class FieldMapper:
    """
    Static lookup from public field names to storage column names.

    Fields without an explicit entry map to themselves.
    """

    def __init__(self, mapping: Optional[Mapping[Union[str, Enum], str]] = None):
        self._mapping: Dict[str, str] = {
            _field_name(k): v for k, v in (mapping or {}).items()
        }

    def column(self, field_id: Union[str, Enum]) -> str:
        name = _field_name(field_id)
        return self._mapping.get(name, name)

    def __repr__(self):
        return f"<FieldMapper({self._mapping})>"


@dataclass(frozen=True)
class Assignments:
    """Ordered (column, placeholder index) pairs of a SET clause."""
    pairs: Tuple[Tuple[str, int], ...]

    def render(self) -> str:
        return ", ".join(f"{quote_ident(col)}=${idx}" for col, idx in self.pairs)


@dataclass(frozen=True)
class PartialUpdate:
    """Result of sql_for_partial_update."""
    assignments: Assignments
    values: List[Any] = field(default_factory=list)
    start: int = 1

    @property
    def set_cols(self) -> str:
        return self.assignments.render()

    @property
    def next_index(self) -> int:
        """First placeholder position not used by the SET clause."""
        return self.start + len(self.assignments.pairs)


def sql_for_partial_update(
    data: Mapping[Union[str, Enum], Any],
    js_to_sql: Union[FieldMapper, Mapping[Union[str, Enum], str], None] = None,
    start: int = 1,
) -> PartialUpdate:
    """
    Build the SET fragment for a partial update.

    Args:
        data: Fields to change, in the order they should appear
        js_to_sql: FieldMapper (or plain mapping) from field name to column
        start: Placeholder number of the first value

    Returns:
        PartialUpdate with set_cols, values and next_index

    Raises:
        InvalidInput: If data is empty

    Example:
        >>> sql_for_partial_update({"firstName": "Aliya", "age": 32}, {"firstName": "first_name"}).set_cols
        '"first_name"=$1, "age"=$2'
    """
    if not data:
        raise InvalidInput("No data")

    mapper = js_to_sql if isinstance(js_to_sql, FieldMapper) else FieldMapper(js_to_sql)

    pairs = tuple(
        (mapper.column(key), start + offset) for offset, key in enumerate(data)
    )
    return PartialUpdate(assignments=Assignments(pairs), values=list(data.values()), start=start)


class WhereBuilder:
    """
    Accumulates AND-ed filter predicates with sequential placeholders.

    Criteria passed as None are skipped and consume no placeholder, so the
    numbering only depends on which criteria are present and the order the
    caller adds them in.
    """

    def __init__(self, start: int = 1):
        self.start = start
        self.predicates: List[str] = []
        self.values: List[Any] = []

    @property
    def next_index(self) -> int:
        return self.start + len(self.values)

    def _bind(self, column: str, op: str, value: Any) -> "WhereBuilder":
        self.predicates.append(f"{quote_ident(column)} {op} ${self.next_index}")
        self.values.append(value)
        return self

    def contains(self, column: str, text: Optional[str]) -> "WhereBuilder":
        """Case-insensitive substring match."""
        if text is None:
            return self
        self.predicates.append(f"lower({quote_ident(column)}) LIKE lower(${self.next_index})")
        self.values.append(f"%{text}%")
        return self

    def at_least(self, column: str, value: Any) -> "WhereBuilder":
        if value is None:
            return self
        return self._bind(column, ">=", value)

    def at_most(self, column: str, value: Any) -> "WhereBuilder":
        if value is None:
            return self
        return self._bind(column, "<=", value)

    def equals(self, column: str, value: Any) -> "WhereBuilder":
        if value is None:
            return self
        return self._bind(column, "=", value)

    def positive(self, column: str, flag: Optional[bool]) -> "WhereBuilder":
        """`column > 0` when flag is true; binds no parameter."""
        if flag:
            self.predicates.append(f"{quote_ident(column)} > 0")
        return self

    def render(self) -> Tuple[str, List[Any]]:
        """Return (" WHERE ...", values), or ("", []) with no predicates."""
        if not self.predicates:
            return "", []
        return " WHERE " + " AND ".join(self.predicates), list(self.values)
