"""Configuration package for rustw.

This package turns a declarative option schema into a typed configuration
record, loads TOML documents that set any subset of the options, and renders
documentation for every option.
"""

from rustw.config.exceptions import (
    ConfigError,
    MalformedDocumentError,
    ParseError,
    SchemaError,
    TypeMismatchError,
    UnknownVariantError,
)
from rustw.config.kinds import (
    ConfigEnum,
    UnsignedInt,
    decode_enum_value,
    describe_kind,
    option_enum,
    register_kind,
)
from rustw.config.merge import fill_from_parsed
from rustw.config.schema import ConfigModel, ParsedConfigModel
from rustw.config.settings import (
    CONFIG_FILE_NAME,
    RustwConfig,
    config_docs,
    default_config,
    load_config,
)

__all__ = [
    # Exceptions
    "ConfigError",
    "SchemaError",
    "ParseError",
    "MalformedDocumentError",
    "TypeMismatchError",
    "UnknownVariantError",
    # Kinds
    "ConfigEnum",
    "UnsignedInt",
    "decode_enum_value",
    "describe_kind",
    "option_enum",
    "register_kind",
    # Schema
    "ConfigModel",
    "ParsedConfigModel",
    "fill_from_parsed",
    # Settings
    "CONFIG_FILE_NAME",
    "RustwConfig",
    "config_docs",
    "default_config",
    "load_config",
]
