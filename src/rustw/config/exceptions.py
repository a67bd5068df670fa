"""Configuration exceptions for rustw."""

from typing import Any


class ConfigError(Exception):
    """Base exception for configuration errors."""

    pass


class SchemaError(ConfigError):
    """Raised when a configuration schema is declared incorrectly.

    These surface while the config class (or option enum) is being defined,
    never while a document is loaded.
    """

    pass


class ParseError(ConfigError):
    """Base exception for problems with a configuration document."""

    pass


class MalformedDocumentError(ParseError):
    """Raised when the document text is not valid TOML."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Could not parse config document: {reason}")


class TypeMismatchError(ParseError):
    """Raised when an option's value cannot be converted to its declared type."""

    def __init__(self, option: str, expected: str, value: Any) -> None:
        self.option = option
        self.expected = expected
        self.value = value
        super().__init__(
            f"Invalid value for '{option}': expected {expected}, got {value!r}"
        )


class UnknownVariantError(ParseError):
    """Raised when a string matches no variant of a closed-choice option."""

    def __init__(
        self,
        enum_name: str,
        value: str,
        variants: list[str],
        option: str | None = None,
    ) -> None:
        self.enum_name = enum_name
        self.value = value
        self.variants = variants
        self.option = option
        target = f"'{option}'" if option else enum_name
        super().__init__(
            f"Bad variant {value!r} for {target}: "
            f"expected one of [{'|'.join(variants)}]"
        )
