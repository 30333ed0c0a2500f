"""Tests for MeasurementConvertor: validation, dispatch, precision and rounding."""

import pytest

from ConversionConfig import ConversionConfig
from ConversionErrors import InvalidNumber, UnknownType, UnsupportedUnit
from Domain import Domain
from MeasurementConvertor import MeasurementConvertor

UNITS = {
    "distance": ["m", "km", "mi"],
    "weight": ["g", "oz", "lb"],
    "temperature": ["C", "F", "K"],
}

PAIRS = [(domain, a, b) for domain, units in UNITS.items() for a in units for b in units]


class TestConvert:
    """Rounded conversions with the default precision of 2."""

    @pytest.mark.parametrize("domain, value, from_unit, to_unit, expected", [
        ("distance", 5, "km", "mi", 3.11),
        ("distance", 10, "km", "mi", 6.21),
        ("distance", 1000, "km", "mi", 621.37),
        ("distance", 1.234567, "km", "mi", 0.77),
        ("distance", 3.456, "km", "mi", 2.15),
        ("distance", 1500, "m", "km", 1.5),
        ("weight", 100, "g", "oz", 3.53),
        ("weight", 50, "g", "oz", 1.76),
        ("weight", 1, "g", "oz", 0.04),
        ("weight", 2, "lb", "g", 907.18),
        ("weight", 1.234, "lb", "g", 559.73),
        ("weight", 0.123, "lb", "g", 55.79),
        ("temperature", 37, "C", "F", 98.6),
        ("temperature", -273.15, "C", "F", -459.67),
        ("temperature", 300, "K", "C", 26.85),
        ("temperature", 25.555, "C", "F", 78.0),
        ("temperature", 20.555, "C", "F", 69.0),
    ])
    def test_known_conversions(self, convertor, domain, value, from_unit, to_unit, expected):
        assert convertor.convert(domain, value, from_unit, to_unit) == expected

    def test_returns_float_not_string(self, convertor):
        assert isinstance(convertor.convert("weight", "100", "g", "oz"), float)

    def test_accepts_domain_enum(self, convertor):
        assert convertor.convert(Domain.DISTANCE, 1000, "m", "km") == 1

    def test_numeric_strings_are_parsed(self, convertor):
        assert convertor.convert("distance", "-2.5e3", "m", "km") == -2.5

    def test_invalid_number(self, convertor):
        with pytest.raises(InvalidNumber):
            convertor.convert("distance", "five", "km", "mi")

    def test_invalid_number_is_checked_before_type(self, convertor):
        with pytest.raises(InvalidNumber):
            convertor.convert("volume", "five", "l", "ml")

    def test_unknown_type(self, convertor):
        with pytest.raises(UnknownType, match="volume"):
            convertor.convert("volume", 1, "l", "ml")

    def test_unit_from_another_domain_is_unsupported(self, convertor):
        with pytest.raises(UnsupportedUnit):
            convertor.convert("distance", 1, "g", "m")

    @pytest.mark.parametrize("domain, value, from_unit, to_unit", [
        ("distance", "1e308", "km", "m"),
        ("weight", "1.7e308", "lb", "g"),
        ("temperature", "1e308", "F", "C"),
    ])
    def test_overflow_after_scaling_is_invalid_number(self, convertor, domain, value, from_unit, to_unit):
        with pytest.raises(InvalidNumber):
            convertor.convert(domain, value, from_unit, to_unit)

    def test_largest_value_that_fits_still_converts(self, convertor):
        assert convertor.convert("distance", "1e300", "km", "m") == pytest.approx(1e303)

    def test_distance_requires_units(self, convertor):
        with pytest.raises(UnsupportedUnit):
            convertor.convert("distance", 1)

    def test_bare_temperature_uses_configured_defaults(self, convertor):
        assert convertor.convert("temperature", 100) == 212.0

    def test_temperature_defaults_come_from_config(self):
        convertor = MeasurementConvertor(ConversionConfig(temperature_default_from="F", temperature_default_to="K"))
        assert convertor.convert("temperature", 212) == 373.15
        assert convertor.convert("temperature", 100, "C") == 373.15

    def test_missing_config_falls_back_to_defaults(self):
        assert MeasurementConvertor().convert("weight", 100, "g", "oz") == 3.53


class TestPrecision:
    """Precision resolution per domain and the rounding tie-break."""

    def test_per_domain_with_fallback(self):
        convertor = MeasurementConvertor(ConversionConfig(precision={"distance": 1, "weight": 3}))
        assert convertor.convert("distance", 1234, "m", "km") == 1.2
        assert convertor.convert("weight", 1, "g", "oz") == 0.035
        assert convertor.convert("temperature", 37.123, "C", "C") == 37.12
        assert convertor.get_precision("temperature") == 2

    def test_global_precision(self):
        convertor = MeasurementConvertor(ConversionConfig(precision=3))
        assert convertor.convert("distance", 5, "km", "mi") == 3.107
        assert convertor.convert("temperature", 1, "K", "C") == -272.15

    def test_zero_precision_rounds_to_integers(self):
        convertor = MeasurementConvertor(ConversionConfig(precision=0))
        assert convertor.convert("distance", 1500, "m", "km") == 2.0

    @pytest.mark.parametrize("value, expected", [
        (2.345, 2.35),
        (-2.345, -2.35),
        (1.005, 1.01),
        (2.344, 2.34),
        (0.125, 0.13),
    ])
    def test_ties_round_half_away_from_zero(self, convertor, value, expected):
        assert convertor.round_value("distance", value) == expected

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    def test_rounding_non_finite_is_invalid_number(self, convertor, value):
        with pytest.raises(InvalidNumber):
            convertor.round_value("distance", value)

    def test_large_values_round_without_error(self, convertor):
        assert convertor.round_value("distance", 1.5e300) == 1.5e300


class TestProperties:
    """Identity, round-trip and canonical-hop equivalence over every unit pair."""

    @pytest.mark.parametrize("domain, unit", [(d, u) for d, units in UNITS.items() for u in units])
    @pytest.mark.parametrize("value", [0, 12.34, -7.5, 98.6])
    def test_identity(self, convertor, domain, unit, value):
        assert convertor.convert(domain, value, unit, unit) == value

    @pytest.mark.parametrize("domain, from_unit, to_unit", PAIRS)
    def test_round_trip(self, domain, from_unit, to_unit):
        convertor = MeasurementConvertor(ConversionConfig(precision=9))
        there = convertor.convert(domain, 42.5, from_unit, to_unit)
        back = convertor.convert(domain, there, to_unit, from_unit)
        assert back == pytest.approx(42.5, abs=1e-5)

    @pytest.mark.parametrize("domain, from_unit, to_unit", PAIRS)
    def test_canonical_hop_equivalence(self, convertor, domain, from_unit, to_unit):
        canonical = convertor.get_common_unit(domain)
        hop = convertor.convert_exact(domain, 17.25, from_unit, canonical)
        composed = convertor.convert_exact(domain, hop, canonical, to_unit)
        assert convertor.convert(domain, 17.25, from_unit, to_unit) == convertor.round_value(domain, composed)


class TestLookups:
    """Unit tables exposed to the command line."""

    @pytest.mark.parametrize("unit, domain", [
        ("km", Domain.DISTANCE), ("mi", Domain.DISTANCE), ("m", Domain.DISTANCE),
        ("g", Domain.WEIGHT), ("oz", Domain.WEIGHT), ("lb", Domain.WEIGHT),
        ("C", Domain.TEMPERATURE), ("F", Domain.TEMPERATURE), ("K", Domain.TEMPERATURE),
    ])
    def test_get_type_from_unit(self, convertor, unit, domain):
        assert convertor.get_type_from_unit(unit) is domain

    @pytest.mark.parametrize("unit", ["xyz", "c", "", None])
    def test_unknown_unit_is_absent_not_an_error(self, convertor, unit):
        assert convertor.get_type_from_unit(unit) is None

    def test_units_belong_to_one_domain(self, convertor):
        all_units = [u for units in convertor.get_units().values() for u in units]
        assert len(all_units) == len(set(all_units)) == 9

    def test_common_units(self, convertor):
        assert convertor.get_common_unit("distance") == "m"
        assert convertor.get_common_unit("weight") == "g"
        assert convertor.get_common_unit("temperature") == "C"
        with pytest.raises(UnknownType):
            convertor.get_common_unit("volume")

    def test_get_units_for_one_domain(self, convertor):
        assert convertor.get_units("temperature") == ["C", "F", "K"]
