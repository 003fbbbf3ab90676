# pandoc_filter/core/domain/tagged.py

"""Base models carrying the wire-shape rules of the document model

Three shapes exist on the wire:

- Tagged variants: ``{"t": <VariantName>, "c": <payload>}``. By the time a
  value reaches pydantic the tag codec has rewritten it to
  ``{<VariantName>: <payload>}``. The payload shape is fixed by the number of
  fields the variant declares (its arity):

    0 fields -> ``[]``
    1 field  -> the field value itself
    N fields -> an N-element array, in field declaration order

- Positional records (Attr, Target, ...): a plain array of the fields.
- Keyed records (Meta, Citation): a plain object using the external names.

Field declaration order is wire order; do not reorder fields of a subclass.
"""

# Standard library imports
from enum import Enum
from math import isfinite
from types import UnionType
from typing import Annotated
from typing import Union
from typing import get_args
from typing import get_origin

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Discriminator
from pydantic import RootModel
from pydantic import model_serializer
from pydantic import model_validator
from pydantic_core import PydanticCustomError

# Local imports
from pandoc_filter.core.domain.errors import EncodeError
from pandoc_filter.core.types.json import JSONPath
from pandoc_filter.core.types.json import JSONType

# Shared configuration for every node of the document tree
DOCUMENT_MODEL_CONFIG = ConfigDict(
    frozen=True,
    extra="forbid",
    validate_by_name=True,
    validate_by_alias=True,
    serialize_by_alias=True,
)


def unpack_payload(
    variant_name: str, field_names: tuple[str, ...], payload: JSONType
) -> dict[str, JSONType]:
    """Map a variant payload onto field names according to the arity rule

    Raises:
        PydanticCustomError: ``arity_mismatch`` when the payload shape does not
            fit the number of fields
    """
    arity = len(field_names)

    if arity == 0:
        if not isinstance(payload, (list, tuple)) or len(payload) != 0:
            raise PydanticCustomError(
                "arity_mismatch",
                "{variant} takes no fields, expected an empty array payload",
                {"variant": variant_name},
            )
        return {}

    if arity == 1:
        return {field_names[0]: payload}

    if not isinstance(payload, (list, tuple)) or len(payload) != arity:
        found = f"{len(payload)} element(s)" if isinstance(payload, (list, tuple)) else "a scalar"
        raise PydanticCustomError(
            "arity_mismatch",
            "{variant} expects an array of {arity} fields, got {found}",
            {"variant": variant_name, "arity": arity, "found": found},
        )
    return dict(zip(field_names, payload))


def pack_payload(values: list[JSONType]) -> JSONType:
    """Inverse of unpack_payload: build the ``c`` value from serialized fields"""
    if not values:
        return []
    if len(values) == 1:
        return values[0]
    return values


class DocumentNode(BaseModel):
    """Common base for document tree nodes

    Accepts positional arguments in field (wire) order as well as keywords,
    so ``Header(1, Attr(), [Str("Hi")])`` and
    ``Header(level=1, attr=Attr(), content=[Str(text="Hi")])`` are equivalent.
    ``model_dump()`` returns the external shape (see ``encode_model``).
    """

    model_config = DOCUMENT_MODEL_CONFIG

    def __init__(self, /, *args: object, **data: object) -> None:
        if args:
            names = tuple(type(self).model_fields)
            if len(args) > len(names):
                raise TypeError(
                    f"{type(self).__name__} takes at most {len(names)} positional "
                    f"argument(s) ({len(args)} given)"
                )
            for name, value in zip(names, args):
                if name in data:
                    raise TypeError(
                        f"{type(self).__name__} got multiple values for argument '{name}'"
                    )
                data[name] = value
        super().__init__(**data)

    @model_serializer(mode="plain")
    def _serialize_external(self) -> object:
        return encode_model(self)


class TaggedVariant(DocumentNode):
    """A member of a tagged union (Block, Inline, MetaValue)

    The variant name is the class name, matching the external format exactly.
    """

    @classmethod
    def variant_name(cls) -> str:
        return cls.__name__

    @model_validator(mode="before")
    @classmethod
    def _unwrap_variant(cls, data: object) -> object:
        # Normalized wire form: {<VariantName>: payload}; keyword construction
        # never collides because field names are lower case
        if isinstance(data, dict) and len(data) == 1:
            ((name, payload),) = data.items()
            if name == cls.variant_name():
                return unpack_payload(name, tuple(cls.model_fields), payload)
        return data


class PositionalRecord(DocumentNode):
    """A fixed-length tuple on the wire (Attr, Target, ListAttributes, ...)"""

    @model_validator(mode="before")
    @classmethod
    def _unpack_positional(cls, data: object) -> object:
        if isinstance(data, (list, tuple)):
            names = tuple(cls.model_fields)
            if len(data) != len(names):
                raise PydanticCustomError(
                    "arity_mismatch",
                    "{record} expects an array of {arity} elements, got {found}",
                    {"record": cls.__name__, "arity": len(names), "found": len(data)},
                )
            return dict(zip(names, data))
        return data


def variant_tag(value: object) -> str | None:
    """Discriminator for tagged unions: the variant name of a node or wire value

    Returns None when the value is neither a variant instance nor a
    single-key object, which pydantic reports as a missing tag.
    """
    if isinstance(value, TaggedVariant):
        return value.variant_name()
    if isinstance(value, dict) and len(value) == 1:
        name = next(iter(value))
        return name if isinstance(name, str) else None
    return None


def unwrap_enum_tag(value: object) -> object:
    """Before-validator for enumerations: ``{<Name>: []}`` becomes ``<Name>``"""
    if isinstance(value, Enum):
        return value
    if isinstance(value, dict) and len(value) == 1:
        ((name, payload),) = value.items()
        unpack_payload(name, (), payload)
        return name
    raise PydanticCustomError(
        "tag_expected", "Expected a tagged enumeration value, got {found}", {"found": repr(value)}
    )


def wrap_enum_tag(member: Enum) -> dict[str, object]:
    """Serializer for enumerations: a nullary tag wrapper"""
    return {"t": member.value, "c": []}


# ---------------------------------------------------------------------------
# Encoding
#
# Encoding follows the declared field annotations and checks every value
# against the type of its position.
# ---------------------------------------------------------------------------

# id(annotation) -> (annotation, variant classes); the annotation is held so
# its id stays unique
_UNION_MEMBERS: dict[int, tuple[object, tuple[type, ...]]] = {}


def _union_members(annotation: object) -> tuple[type, ...]:
    """Variant classes of a discriminated union alias; empty for other Annotated types"""
    cached = _UNION_MEMBERS.get(id(annotation))
    if cached is None:
        base, *metadata = get_args(annotation)
        members: tuple[type, ...] = ()
        if any(isinstance(item, Discriminator) for item in metadata):
            members = tuple(get_args(member)[0] for member in get_args(base))
        cached = _UNION_MEMBERS[id(annotation)] = (annotation, members)
    return cached[1]


def _type_name(annotation: object) -> str:
    return getattr(annotation, "__name__", None) or repr(annotation)


def _is_scalar(value: object, annotation: object) -> bool:
    if annotation is bool:
        return isinstance(value, bool)
    if isinstance(value, bool):
        return False
    if annotation is int:
        return isinstance(value, int)
    if annotation is float:
        return isinstance(value, int) or (isinstance(value, float) and isfinite(value))
    if annotation is str:
        return isinstance(value, str)
    return False


def encode_value(value: object, annotation: object, path: JSONPath = ()) -> JSONType:
    """Encode ``value`` into the external shape, checking it against ``annotation``

    Args:
        value: A model value, enumeration member, scalar or container of them
        annotation: The type declared for the position ``value`` occupies
        path: Location of ``value`` in the output, used in error messages

    Raises:
        EncodeError: If the value does not fit the declared type
    """
    while get_origin(annotation) is Annotated:
        members = _union_members(annotation)
        if members:
            if not isinstance(value, members):
                raise EncodeError(
                    f"{type(value).__name__} is not a member of this union "
                    f"({', '.join(member.__name__ for member in members)})",
                    path,
                )
            return encode_model(value, path)
        annotation = get_args(annotation)[0]

    origin = get_origin(annotation)
    if origin is list:
        if not isinstance(value, list):
            raise EncodeError(f"Expected a list, got {type(value).__name__}", path)
        (item_type,) = get_args(annotation)
        return [encode_value(item, item_type, (*path, i)) for i, item in enumerate(value)]

    if origin is tuple:
        item_types = get_args(annotation)
        if not isinstance(value, (tuple, list)) or len(value) != len(item_types):
            raise EncodeError(f"Expected a tuple of {len(item_types)} element(s)", path)
        return [
            encode_value(item, item_type, (*path, i))
            for i, (item, item_type) in enumerate(zip(value, item_types))
        ]

    if origin is dict:
        if not isinstance(value, dict):
            raise EncodeError(f"Expected a mapping, got {type(value).__name__}", path)
        _, item_type = get_args(annotation)
        encoded: dict[str, JSONType] = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise EncodeError(f"Mapping keys must be strings, got {type(key).__name__}", path)
            encoded[key] = encode_value(item, item_type, (*path, key))
        return encoded

    if origin is Union or origin is UnionType:
        for option in get_args(annotation):
            try:
                return encode_value(value, option, path)
            except EncodeError:
                continue
        raise EncodeError(f"{type(value).__name__} matches none of {annotation}", path)

    if isinstance(annotation, type):
        if issubclass(annotation, BaseModel):
            if not isinstance(value, annotation):
                raise EncodeError(
                    f"Expected {annotation.__name__}, got {type(value).__name__}", path
                )
            return encode_model(value, path)
        if issubclass(annotation, Enum):
            if not isinstance(value, annotation):
                raise EncodeError(
                    f"Expected {annotation.__name__}, got {type(value).__name__}", path
                )
            return wrap_enum_tag(value)
        if _is_scalar(value, annotation):
            return value

    raise EncodeError(f"Expected {_type_name(annotation)}, got {value!r}", path)


def encode_model(node: BaseModel, path: JSONPath = ()) -> JSONType:
    """Encode a document model instance: tag wrapper, positional array or keyed object"""
    fields = type(node).model_fields

    if isinstance(node, RootModel):
        return encode_value(node.root, fields["root"].annotation, path)

    if isinstance(node, TaggedVariant):
        payload_path = (*path, "c")
        values = [
            encode_value(
                getattr(node, name),
                field.annotation,
                payload_path if len(fields) == 1 else (*payload_path, i),
            )
            for i, (name, field) in enumerate(fields.items())
        ]
        return {"t": node.variant_name(), "c": pack_payload(values)}

    if isinstance(node, PositionalRecord):
        return [
            encode_value(getattr(node, name), field.annotation, (*path, i))
            for i, (name, field) in enumerate(fields.items())
        ]

    encoded: dict[str, JSONType] = {}
    for name, field in fields.items():
        key = field.alias or name
        encoded[key] = encode_value(getattr(node, name), field.annotation, (*path, key))
    return encoded
