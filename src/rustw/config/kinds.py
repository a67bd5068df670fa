"""Value kinds for configuration options.

Every type an option may be declared with needs a short description of its
legal values. The description is shown in the generated docs, and for
closed-choice (enum) options the variant list is also what documents are
decoded against.
"""

import string
from enum import Enum
from typing import Any, TypeVar

from pydantic import NonNegativeInt

from .exceptions import SchemaError, UnknownVariantError

# Integer options are unsigned.
UnsignedInt = NonNegativeInt

E = TypeVar("E", bound=Enum)

_KINDS: dict[type, str] = {
    bool: "<boolean>",
    int: "<unsigned integer>",
    str: "<string>",
}

# Only A-Z are folded; non-ASCII letters compare as written.
_ASCII_FOLD = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def ascii_fold(text: str) -> str:
    """Lowercase the ASCII letters of ``text``, leaving everything else."""
    return text.translate(_ASCII_FOLD)


def register_kind(value_type: type, description: str) -> None:
    """Register the value description for an additional option type.

    Args:
        value_type: The Python type options may be declared with.
        description: Text describing its legal values, e.g. ``"<float>"``.
    """
    _KINDS[value_type] = description


def is_enum_kind(value_type: Any) -> bool:
    """Check whether ``value_type`` is a closed-choice enumeration."""
    return isinstance(value_type, type) and issubclass(value_type, Enum)


def describe_kind(value_type: Any) -> str:
    """Describe the legal values of an option type.

    Args:
        value_type: The declared type of an option.

    Returns:
        ``<boolean>``, ``<unsigned integer>``, ``<string>``, a registered
        description, or ``[A|B|...]`` for enumerations.

    Raises:
        SchemaError: If no description exists for ``value_type``.
    """
    if is_enum_kind(value_type):
        return f"[{'|'.join(member.name for member in value_type)}]"
    try:
        return _KINDS[value_type]
    except (KeyError, TypeError):
        raise SchemaError(
            f"No value kind registered for option type {value_type!r}"
        ) from None


def _find_variant(enum_type: type[E], raw: str) -> E | None:
    folded = ascii_fold(raw)
    for member in enum_type:
        if ascii_fold(member.name) == folded:
            return member
    return None


def decode_enum_value(
    enum_type: type[E], raw: str, *, option: str | None = None
) -> E:
    """Decode a raw string into a member of ``enum_type``.

    Names are compared with ASCII case folding; the first member in
    declaration order that matches wins.

    Args:
        enum_type: The enumeration to decode into.
        raw: The string from the document.
        option: Name of the option being decoded, used in the error message.

    Returns:
        The matching enum member.

    Raises:
        UnknownVariantError: If no member name matches.
    """
    member = _find_variant(enum_type, raw)
    if member is None:
        raise UnknownVariantError(
            enum_type.__name__,
            raw,
            [m.name for m in enum_type],
            option=option,
        )
    return member


class ConfigEnum(Enum):
    """Base class for closed-choice option types.

    Member values equal their names, and lookups by value ignore ASCII case::

        class Mode(ConfigEnum):
            Debug = auto()
            Release = auto()

        Mode("release") is Mode.Release
    """

    def _generate_next_value_(name, start, count, last_values):  # noqa: N805
        return name

    @classmethod
    def _missing_(cls, value: object) -> "ConfigEnum | None":
        if isinstance(value, str):
            return _find_variant(cls, value)
        return None

    def __str__(self) -> str:
        return self.name


def option_enum(name: str, *variants: str) -> type[ConfigEnum]:
    """Declare a closed-choice option type from its variant names.

    Args:
        name: Name of the new enumeration.
        *variants: Variant names, in the order they should be documented.

    Returns:
        A new ``ConfigEnum`` subclass.

    Raises:
        SchemaError: If no variants are given, or a name is empty or repeated.
    """
    if not variants:
        raise SchemaError(f"Option enum {name} needs at least one variant")
    seen: set[str] = set()
    for variant in variants:
        if not variant.isidentifier():
            raise SchemaError(f"Invalid variant name {variant!r} in {name}")
        if variant in seen:
            raise SchemaError(f"Duplicate variant {variant!r} in {name}")
        seen.add(variant)
    return ConfigEnum(name, list(variants))
