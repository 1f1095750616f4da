"""Request parameter validation and query-string encoding.

Every endpoint declares its parameters as a sequence of ``FieldSpec``.
``validate_and_encode`` merges caller options with the declared defaults,
checks types and produces the ordered ``(key, value)`` pairs sent on the wire.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union
from urllib.parse import quote
import logging

from .exceptions import BadArgumentTypeError, MissingParameterError, UnexpectedParameterError

logger = logging.getLogger(__name__)

NUMBER = "number"
STRING = "string"

# Characters encodeURIComponent leaves untouched, the remote API expects the same
SAFE_CHARS = "-_.!~*'()"
ARRAY_SEPARATOR = ","

EncodedQuery = List[Tuple[str, str]]


class _Absent:
    """Marker for a field without a default."""

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = _Absent()


def is_number(value: Any) -> bool:
    # bool is an int subclass but never a valid number parameter
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _matches(value: Any, type_name: str) -> bool:
    if type_name == NUMBER:
        return is_number(value)
    return isinstance(value, str)


def _type_name(value: Any) -> str:
    if value is None:
        return "None"
    if isinstance(value, (list, tuple)):
        inner = sorted({type(v).__name__ for v in value})
        return f"{type(value).__name__} of {', '.join(inner)}" if inner else f"empty {type(value).__name__}"
    return type(value).__name__


@dataclass(frozen=True)
class Scalar:
    """A single number or string."""
    type: str

    def accepts(self, value: Any) -> bool:
        return _matches(value, self.type)

    def describe(self) -> str:
        return self.type


@dataclass(frozen=True)
class ArrayOrScalar:
    """A single value or a homogeneous list/tuple of values."""
    type: str

    def accepts(self, value: Any) -> bool:
        if isinstance(value, (list, tuple)):
            return all(_matches(v, self.type) for v in value)
        return _matches(value, self.type)

    def describe(self) -> str:
        return f"{self.type} or list of {self.type}s"


@dataclass(frozen=True)
class Nullable:
    """Wraps another kind and additionally allows None."""
    kind: "Kind"

    def accepts(self, value: Any) -> bool:
        return value is None or self.kind.accepts(value)

    def describe(self) -> str:
        return f"{self.kind.describe()} or None"


Kind = Union[Scalar, ArrayOrScalar, Nullable]


@dataclass(frozen=True)
class FieldSpec:
    """Declares one request parameter."""
    name: str
    kind: Kind
    default: Any = ABSENT
    required: bool = False

    def __post_init__(self):
        if self.default is not ABSENT and not self.kind.accepts(self.default):
            raise ValueError(
                f"Default {self.default!r} of field '{self.name}' does not match {self.kind.describe()}"
            )


def field(name: str, kind: Kind, default: Any = ABSENT, required: bool = False) -> FieldSpec:
    """Shorthand used by the endpoint table."""
    return FieldSpec(name=name, kind=kind, default=default, required=required)


def validate(options: Optional[Mapping[str, Any]], specs: Sequence[FieldSpec]) -> Dict[str, Any]:
    """
    Merge options with defaults and check every value against its kind.

    Args:
        options: Caller supplied parameters, ``None`` values count as not supplied
        specs: Declared fields, in wire order

    Returns:
        Mapping of field name to resolved value, in declaration order.
        Fields with neither a value nor a default are left out.

    Raises:
        UnexpectedParameterError: options contain an undeclared key
        MissingParameterError: a required field has no value
        BadArgumentTypeError: a value does not match its kind
    """
    options = options or {}
    declared = {spec.name for spec in specs}
    for key in options:
        if key not in declared:
            raise UnexpectedParameterError(key)

    resolved: Dict[str, Any] = {}
    for spec in specs:
        value = options.get(spec.name)
        if value is None:
            value = spec.default
        if value is ABSENT:
            if spec.required:
                raise MissingParameterError(spec.name)
            continue
        if not spec.kind.accepts(value):
            raise BadArgumentTypeError(spec.name, spec.kind.describe(), _type_name(value))
        resolved[spec.name] = value
    return resolved


def _format_scalar(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def escape(raw: str) -> str:
    """Percent-encode a query value, keeping the pipe separator literal."""
    return quote(raw, safe=SAFE_CHARS).replace("%7C", "|")


def encode_value(value: Any) -> Optional[str]:
    """
    Turn a validated value into its wire form.

    Lists are joined with commas in their original order. Returns ``None``
    for ``None`` so callers can drop the field.
    """
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        raw = ARRAY_SEPARATOR.join(_format_scalar(v) for v in value)
    else:
        raw = _format_scalar(value)
    return escape(raw)


def encode(values: Mapping[str, Any]) -> EncodedQuery:
    """Encode resolved values, dropping None and empty results."""
    pairs: EncodedQuery = []
    for name, value in values.items():
        encoded = encode_value(value)
        if encoded is None or encoded == "":
            continue
        pairs.append((name, encoded))
    return pairs


def validate_and_encode(options: Optional[Mapping[str, Any]], specs: Sequence[FieldSpec]) -> EncodedQuery:
    """Validate options against specs and return the ordered query pairs.

    Required fields whose value encodes to nothing, such as an empty list,
    count as missing.
    """
    pairs = encode(validate(options, specs))
    present = {name for name, _ in pairs}
    for spec in specs:
        if spec.required and spec.name not in present:
            raise MissingParameterError(spec.name)
    logger.debug(f"Encoded parameters: {pairs}")
    return pairs


def build_query(pairs: Iterable[Tuple[str, str]]) -> str:
    """Join already escaped pairs into a query string."""
    return "&".join(f"{key}={value}" for key, value in pairs)
