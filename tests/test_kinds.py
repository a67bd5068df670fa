"""Tests for config/kinds.py value kinds and enum decoding."""

from enum import Enum, auto

import pytest

from rustw.config import (
    ConfigEnum,
    SchemaError,
    UnknownVariantError,
    decode_enum_value,
    describe_kind,
    option_enum,
    register_kind,
)
from rustw.config import kinds


class TestDescribeKind:
    """Tests for describe_kind."""

    def test_boolean(self) -> None:
        """bool is described as a boolean."""
        assert describe_kind(bool) == "<boolean>"

    def test_unsigned_integer(self) -> None:
        """int is described as an unsigned integer."""
        assert describe_kind(int) == "<unsigned integer>"

    def test_string(self) -> None:
        """str is described as a string."""
        assert describe_kind(str) == "<string>"

    def test_enum_lists_variants_in_order(self, mode_enum: type[ConfigEnum]) -> None:
        """Enums list their variant names in declaration order."""
        assert describe_kind(mode_enum) == "[Debug|Release|NVariant]"

    def test_plain_enum(self) -> None:
        """Any Enum subclass is described by its member names."""

        class Color(Enum):
            Red = 1
            Green = 2

        assert describe_kind(Color) == "[Red|Green]"

    def test_undescribed_type(self) -> None:
        """Types without a description raise SchemaError."""
        with pytest.raises(SchemaError, match="No value kind"):
            describe_kind(float)

    def test_generic_alias_undescribed(self) -> None:
        """Parameterized generics are not describable either."""
        with pytest.raises(SchemaError):
            describe_kind(list[str])

    def test_register_kind(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Registered types use their registered description."""
        monkeypatch.setattr(kinds, "_KINDS", dict(kinds._KINDS))

        class Celsius(float):
            pass

        register_kind(Celsius, "<degrees celsius>")
        assert describe_kind(Celsius) == "<degrees celsius>"


class TestDecodeEnumValue:
    """Tests for decode_enum_value."""

    def test_every_variant_decodes(self, mode_enum: type[ConfigEnum]) -> None:
        """Each variant name decodes to its own member."""
        for member in mode_enum:
            assert decode_enum_value(mode_enum, member.name) is member

    def test_case_insensitive(self, mode_enum: type[ConfigEnum]) -> None:
        """Matching ignores ASCII case."""
        assert decode_enum_value(mode_enum, "nvariant") is mode_enum.NVariant
        assert decode_enum_value(mode_enum, "RELEASE") is mode_enum.Release
        assert decode_enum_value(mode_enum, "dEbUg") is mode_enum.Debug

    def test_unknown_variant(self, mode_enum: type[ConfigEnum]) -> None:
        """Unmatched strings raise UnknownVariantError."""
        with pytest.raises(UnknownVariantError) as exc_info:
            decode_enum_value(mode_enum, "not-a-real-variant")

        err = exc_info.value
        assert err.enum_name == "Mode"
        assert err.value == "not-a-real-variant"
        assert err.variants == ["Debug", "Release", "NVariant"]
        assert err.option is None
        assert "[Debug|Release|NVariant]" in str(err)

    def test_unknown_variant_names_option(self, mode_enum: type[ConfigEnum]) -> None:
        """The option name is included when given."""
        with pytest.raises(UnknownVariantError, match="'mode'") as exc_info:
            decode_enum_value(mode_enum, "fast", option="mode")
        assert exc_info.value.option == "mode"

    def test_no_partial_match(self, mode_enum: type[ConfigEnum]) -> None:
        """Prefixes and padded names do not match."""
        with pytest.raises(UnknownVariantError):
            decode_enum_value(mode_enum, "Deb")
        with pytest.raises(UnknownVariantError):
            decode_enum_value(mode_enum, " Debug")

    def test_first_match_wins(self) -> None:
        """Names equal under case folding resolve to the first declared."""
        Level = option_enum("Level", "Low", "LOW")
        assert decode_enum_value(Level, "low") is Level.Low

    def test_only_ascii_is_folded(self) -> None:
        """Non-ASCII letters must match their declared case."""
        Accent = option_enum("Accent", "Étoile")
        assert decode_enum_value(Accent, "ÉTOILE") is Accent.Étoile
        with pytest.raises(UnknownVariantError):
            decode_enum_value(Accent, "étoile")


class TestConfigEnum:
    """Tests for ConfigEnum and option_enum."""

    def test_values_are_names(self, mode_enum: type[ConfigEnum]) -> None:
        """Member values equal their names."""
        assert [m.value for m in mode_enum] == ["Debug", "Release", "NVariant"]

    def test_str_is_name(self, mode_enum: type[ConfigEnum]) -> None:
        """str() gives the variant name."""
        assert str(mode_enum.Release) == "Release"

    def test_lookup_ignores_case(self, mode_enum: type[ConfigEnum]) -> None:
        """Calling the enum with a differently cased name finds the member."""
        assert mode_enum("release") is mode_enum.Release

    def test_lookup_unknown(self, mode_enum: type[ConfigEnum]) -> None:
        """Unknown names still raise ValueError on lookup."""
        with pytest.raises(ValueError):
            mode_enum("fast")

    def test_option_enum(self) -> None:
        """option_enum declares variants in the given order."""
        Style = option_enum("Style", "Default", "Rfc")
        assert issubclass(Style, ConfigEnum)
        assert Style.__name__ == "Style"
        assert [m.name for m in Style] == ["Default", "Rfc"]
        assert Style("rfc") is Style.Rfc

    def test_class_declaration(self) -> None:
        """Enums can also be declared with class syntax."""

        class Density(ConfigEnum):
            Compressed = auto()
            Tall = auto()

        assert Density.Tall.value == "Tall"
        assert describe_kind(Density) == "[Compressed|Tall]"

    def test_option_enum_needs_variants(self) -> None:
        """An enum without variants is rejected."""
        with pytest.raises(SchemaError, match="at least one variant"):
            option_enum("Nothing")

    def test_option_enum_duplicate(self) -> None:
        """Repeated variant names are rejected."""
        with pytest.raises(SchemaError, match="Duplicate"):
            option_enum("Twice", "A", "A")

    def test_option_enum_invalid_name(self) -> None:
        """Variant names must be identifiers."""
        with pytest.raises(SchemaError, match="Invalid variant"):
            option_enum("Broken", "not-valid")
