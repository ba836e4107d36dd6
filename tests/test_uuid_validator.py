"""Tests for the UUID format validator."""

import pytest

from dataknobs_validators import CONCRETE_FORMATS, UuidFormat, matches_format

UUID_DEFAULT = "02aa7f48-3ccd-11e4-b63e-14109ff1a304"
UUID_HEX = "02aa7f483ccd11e4b63e14109ff1a304"
UUID_URN = "urn:uuid:02aa7f48-3ccd-11e4-b63e-14109ff1a304"
UUID_SHORT = "02aa7f48-3ccd-11e4-b63e-14109ff1a30"

SAMPLES = {
    UuidFormat.DEFAULT: UUID_DEFAULT,
    UuidFormat.HEX: UUID_HEX,
    UuidFormat.URN: UUID_URN,
}


class TestMatchesFormat:
    """Test the structural layouts."""

    @pytest.mark.parametrize("fmt", CONCRETE_FORMATS)
    @pytest.mark.parametrize("sample_fmt", CONCRETE_FORMATS)
    def test_each_sample_matches_only_its_format(self, fmt, sample_fmt):
        assert matches_format(SAMPLES[sample_fmt], fmt) is (fmt is sample_fmt)

    def test_format_order(self):
        assert CONCRETE_FORMATS == (UuidFormat.DEFAULT, UuidFormat.HEX, UuidFormat.URN)

    def test_uppercase_digits_match(self):
        assert matches_format("5FCF6936-0F5A-41C6-9716-9B3274AAB6D8", UuidFormat.DEFAULT)
        assert matches_format(UUID_HEX.upper(), UuidFormat.HEX)

    def test_urn_prefix_is_exact(self):
        assert not matches_format("URN:UUID:" + UUID_DEFAULT, UuidFormat.URN)
        assert not matches_format("urn:guid:" + UUID_DEFAULT, UuidFormat.URN)

    @pytest.mark.parametrize(
        "value",
        [
            UUID_SHORT,
            UUID_DEFAULT + "0",
            UUID_DEFAULT + "\n",
            "02aa7f48-3ccd-11e4-b63e-14109ff1a30g",
            "02aa7f48_3ccd_11e4_b63e_14109ff1a304",
            "02aa7f483-ccd-11e4-b63e-14109ff1a304",
            " " + UUID_DEFAULT[1:],
        ],
    )
    def test_default_layout_mismatches(self, value):
        assert not matches_format(value, UuidFormat.DEFAULT)

    def test_bytes_values(self):
        assert matches_format(UUID_DEFAULT.encode(), UuidFormat.DEFAULT)
        assert matches_format(bytearray(UUID_HEX.encode()), UuidFormat.HEX)
        assert matches_format(UUID_URN.encode(), UuidFormat.URN)
        assert not matches_format(UUID_HEX.encode(), UuidFormat.DEFAULT)

    @pytest.mark.parametrize("value", [None, 12345, UuidFormat.ANY, [UUID_DEFAULT]])
    def test_non_text_values_never_match(self, value):
        for fmt in CONCRETE_FORMATS:
            assert not matches_format(value, fmt)


class TestUuidValidatorConcreteFormats:
    """Test validation against a single format."""

    def test_default(self, uuid_validator):
        assert uuid_validator.validate(UUID_DEFAULT, {"format": "default"}).valid
        result = uuid_validator.validate(UUID_HEX, {"format": "default"})
        assert result.reason == "must be a valid UUID in default format"
        result = uuid_validator.validate(UUID_URN, {"format": "default"})
        assert result.reason == "must be a valid UUID in default format"

    def test_hex(self, uuid_validator):
        result = uuid_validator.validate(UUID_DEFAULT, {"format": "hex"})
        assert not result.valid
        assert result.reason == "must be a valid UUID in hex format"
        assert result.context == {"value": UUID_DEFAULT, "format": "hex"}
        assert uuid_validator.validate(UUID_HEX, {"format": "hex"}).valid
        assert not uuid_validator.validate(UUID_URN, {"format": "hex"}).valid

    def test_urn(self, uuid_validator):
        result = uuid_validator.validate(UUID_DEFAULT, {"format": "urn"})
        assert result.reason == "must be a valid UUID in urn format"
        assert not uuid_validator.validate(UUID_HEX, {"format": "urn"}).valid
        assert uuid_validator.validate(UUID_URN, {"format": "urn"}).valid

    def test_format_enum_argument(self, uuid_validator):
        assert uuid_validator.validate(UUID_HEX, {"format": UuidFormat.HEX}).valid

    def test_non_string_value(self, uuid_validator):
        result = uuid_validator.validate(42, {"format": "default"})
        assert result.reason == "must be a valid UUID in default format"


class TestUuidValidatorMetaFormats:
    """Test the 'any' and 'not_any' formats and their boolean shorthands."""

    @pytest.mark.parametrize("options", ["any", True, {"format": "any"}, {"format": True}])
    def test_any(self, uuid_validator, options):
        for value in (UUID_DEFAULT, UUID_HEX, UUID_URN):
            assert uuid_validator.validate(value, options).valid

        for value in ("not_a_uuid", UUID_SHORT, None, UuidFormat.ANY):
            result = uuid_validator.validate(value, options)
            assert not result.valid
            assert result.reason == "must be a valid UUID"

    @pytest.mark.parametrize("options", ["not_any", False, {"format": "not_any"}, {"format": False}])
    def test_not_any(self, uuid_validator, options):
        for value in (UUID_DEFAULT, UUID_HEX, UUID_URN):
            result = uuid_validator.validate(value, options)
            assert not result.valid
            assert result.reason == "must not be a UUID"

        for value in ("not_a_uuid", "not-a-uuid", UUID_SHORT, None, 7):
            assert uuid_validator.validate(value, options).valid

    @pytest.mark.parametrize("value", [UUID_DEFAULT, UUID_HEX, UUID_URN, "not_a_uuid", b"x"])
    def test_shorthand_matches_canonical(self, uuid_validator, value):
        assert uuid_validator.validate(value, True) == uuid_validator.validate(
            value, {"format": "any"}
        )
        assert uuid_validator.validate(value, False) == uuid_validator.validate(
            value, {"format": "not_any"}
        )
        for fmt in CONCRETE_FORMATS:
            assert uuid_validator.validate(value, fmt.value) == uuid_validator.validate(
                value, {"format": fmt.value}
            )


class TestUuidValidatorOptions:
    """Test configuration errors."""

    @pytest.mark.parametrize(
        "options",
        ["guid", {"format": "guid"}, {}, {"format": None}, 1, None, [("format", "braces")]],
    )
    def test_invalid_format(self, uuid_validator, options):
        result = uuid_validator.validate(UUID_DEFAULT, options)
        assert not result.valid
        assert result.reason == "must provide a valid UUID format in options"
        assert result.context["value"] == UUID_DEFAULT

    def test_keyword_list_options(self, uuid_validator):
        assert uuid_validator.validate(UUID_URN, [("format", "urn")]).valid

    def test_repeated_calls_are_identical(self, uuid_validator):
        first = uuid_validator.validate(UUID_DEFAULT, "hex")
        assert uuid_validator.validate(UUID_DEFAULT, "hex") == first
