"""Declarative configuration schemas built on Pydantic models.

A ``ConfigModel`` subclass is the single declaration of a tool's options:
each field is one option, its ``Field(default=..., description=...)`` gives
the default and the help text. From that one declaration the class derives

- the full record (the class itself, frozen once built),
- a sparse overlay twin where every option is optional, used to parse
  documents that only set some options,
- the TOML loading entry point (parse the overlay, merge it onto defaults),
- the option documentation printed by ``print_docs``.
"""

import logging
import tomllib
import unicodedata
from enum import Enum
from typing import Annotated, Any, ClassVar, Optional, Self

import click
from pydantic import BaseModel, ConfigDict, ValidationError, create_model
from pydantic.fields import FieldInfo

from .exceptions import MalformedDocumentError, SchemaError, TypeMismatchError
from .kinds import decode_enum_value, describe_kind, is_enum_kind
from .merge import fill_from_parsed

logger = logging.getLogger(__name__)


# Escapes used by Rust's Debug formatting of strings
_DEBUG_ESCAPES = {
    "\0": "\\0",
    "\t": "\\t",
    "\n": "\\n",
    "\r": "\\r",
    '"': '\\"',
    "\\": "\\\\",
}

# Short escapes allowed in TOML basic strings
_TOML_ESCAPES = {
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
    '"': '\\"',
    "\\": "\\\\",
}


def _is_control(char: str) -> bool:
    return unicodedata.category(char) == "Cc"


def _debug_string(value: str) -> str:
    out = []
    for char in value:
        if char in _DEBUG_ESCAPES:
            out.append(_DEBUG_ESCAPES[char])
        elif _is_control(char):
            out.append(f"\\u{{{ord(char):x}}}")
        else:
            out.append(char)
    return '"' + "".join(out) + '"'


def _toml_string(value: str) -> str:
    out = []
    for char in value:
        if char in _TOML_ESCAPES:
            out.append(_TOML_ESCAPES[char])
        elif _is_control(char):
            out.append(f"\\u{ord(char):04x}")
        else:
            out.append(char)
    return '"' + "".join(out) + '"'


def format_default(value: Any) -> str:
    """Format a default value the way the option docs show it.

    Strings use Rust ``Debug`` escaping, e.g. ``"\\u{1}"`` for U+0001.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, str):
        return _debug_string(value)
    return repr(value)


def format_toml_value(value: Any) -> str:
    """Format an option value as a TOML literal.

    Control characters, which TOML basic strings may not contain raw, are
    written as ``\\uXXXX`` escapes.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return _toml_string(value.name)
    if isinstance(value, str):
        return _toml_string(value)
    return repr(value)


def _has_lower_bound(metadata: list[Any]) -> bool:
    # For integers gt=-1 is the same bound as ge=0
    for constraint in metadata:
        ge = getattr(constraint, "ge", None)
        if ge is not None and ge >= 0:
            return True
        gt = getattr(constraint, "gt", None)
        if gt is not None and gt >= -1:
            return True
    return False


def _check_option(model_name: str, name: str, field: FieldInfo) -> None:
    if field.is_required():
        raise SchemaError(f"Option '{name}' in {model_name} has no default")
    if not field.description:
        raise SchemaError(f"Option '{name}' in {model_name} has no help text")
    try:
        describe_kind(field.annotation)
    except SchemaError as exc:
        raise SchemaError(f"Option '{name}' in {model_name}: {exc}") from exc
    if field.annotation is int and not _has_lower_bound(field.metadata):
        raise SchemaError(
            f"Option '{name}' in {model_name} must be declared as UnsignedInt"
        )


def _constrained(field: FieldInfo) -> Any:
    """Rebuild a field's type with its constraints (e.g. ``ge=0``) attached."""
    if field.metadata:
        return Annotated[(field.annotation, *field.metadata)]
    return field.annotation


def _type_mismatch(
    fields: dict[str, FieldInfo], exc: ValidationError
) -> TypeMismatchError:
    error = exc.errors()[0]
    option = str(error["loc"][0])
    return TypeMismatchError(
        option, describe_kind(fields[option].annotation), error.get("input")
    )


class ParsedConfigModel(BaseModel):
    """Base for the sparse twin of a ``ConfigModel``.

    Every option is optional here; ``None`` means the document did not set it.
    """

    model_config = ConfigDict(strict=True, frozen=True, extra="ignore")


class ConfigModel(BaseModel):
    """Base class for declarative configuration schemas.

    Subclasses declare options as fields, each with a default and a
    description (one help line per ``\\n``-separated line). Declaration
    problems raise ``SchemaError`` when the subclass is defined.

    Example:
        class AppConfig(ConfigModel):
            port: UnsignedInt = Field(default=8080, description="port to serve on")
            verbose: bool = Field(default=False, description="log more")

        config = AppConfig.from_toml("port = 9000")
    """

    model_config = ConfigDict(strict=True, frozen=True, extra="forbid")

    __overlay_model__: ClassVar[type[ParsedConfigModel]] = ParsedConfigModel

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)

        overlay_fields: dict[str, Any] = {}
        for name, field in cls.model_fields.items():
            _check_option(cls.__name__, name, field)
            overlay_fields[name] = (Optional[_constrained(field)], None)

        # Defaults are not validated on construction, so check them once here
        try:
            cls.model_validate(
                {
                    name: field.get_default(call_default_factory=True)
                    for name, field in cls.model_fields.items()
                }
            )
        except ValidationError as exc:
            raise SchemaError(f"Invalid default in {cls.__name__}: {exc}") from exc

        cls.__overlay_model__ = create_model(
            f"Parsed{cls.__name__}",
            __base__=ParsedConfigModel,
            __module__=cls.__module__,
            **overlay_fields,
        )

    @classmethod
    def overlay_model(cls) -> type[ParsedConfigModel]:
        """Return the sparse twin of this schema."""
        return cls.__overlay_model__

    @classmethod
    def default(cls) -> Self:
        """Build the record with every option at its declared default."""
        return cls()

    @classmethod
    def parse_overlay(cls, text: str) -> ParsedConfigModel:
        """Parse a TOML document that may set any subset of the options.

        Keys that are not options are ignored.

        Args:
            text: The document text.

        Returns:
            A sparse record holding only the options the document set.

        Raises:
            MalformedDocumentError: If ``text`` is not valid TOML.
            TypeMismatchError: If an option's value has the wrong type.
            UnknownVariantError: If an enum option names no known variant.
        """
        try:
            document = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            raise MalformedDocumentError(str(exc)) from exc

        fields = cls.model_fields
        unknown = [key for key in document if key not in fields]
        if unknown:
            logger.debug("Ignoring unrecognized config keys: %s", ", ".join(unknown))

        values: dict[str, Any] = {}
        for name, raw in document.items():
            field = fields.get(name)
            if field is None:
                continue
            if is_enum_kind(field.annotation) and isinstance(raw, str):
                raw = decode_enum_value(field.annotation, raw, option=name)
            values[name] = raw

        try:
            return cls.overlay_model().model_validate(values)
        except ValidationError as exc:
            raise _type_mismatch(fields, exc) from exc

    def fill_from_parsed(self, parsed: ParsedConfigModel) -> Self:
        """Return a copy with the options set in ``parsed`` overlaid."""
        return fill_from_parsed(self, parsed)

    @classmethod
    def from_toml(cls, text: str) -> Self:
        """Load a configuration document on top of the defaults.

        This is the entry point applications should use. A document that
        fails to parse raises; it never falls back to the defaults.

        Args:
            text: The document text.

        Returns:
            The full configuration record.

        Raises:
            ParseError: If the document is malformed or has invalid values.
        """
        return cls.default().fill_from_parsed(cls.parse_overlay(text))

    @classmethod
    def get_docs(cls) -> str:
        """Render the documentation for every option, in declaration order."""
        fields = cls.model_fields
        width = max((len(name) for name in fields), default=0)
        indent = " " * (width + 1)

        lines = ["Configuration Options:"]
        for name, field in fields.items():
            default = field.get_default(call_default_factory=True)
            lines.append(
                f"{name:>{width}} {describe_kind(field.annotation)} "
                f"Default: {format_default(default)}"
            )
            for help_line in (field.description or "").splitlines():
                lines.append(f"{indent}{help_line}")
            lines.append("")
        return "\n".join(lines) + "\n"

    @classmethod
    def print_docs(cls) -> None:
        """Print the option documentation to standard output."""
        click.echo(cls.get_docs(), nl=False)

    def to_toml(self) -> str:
        """Serialize every option as a ``name = value`` line."""
        return "".join(
            f"{name} = {format_toml_value(value)}\n" for name, value in self
        )
