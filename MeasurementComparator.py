"""
Compare two measurements of the same physical quantity.

Both measurements are normalized to the canonical unit of their domain
(meters, grams or Celsius). The ordering is decided on the unrounded
canonical values; only the reported difference is rounded, using the same
precision rule as `MeasurementConvertor`. Rounding before comparing would
report e.g. 1000 m and 0.9999999 km as equal.
"""

from ComparisonResult import ComparisonResult, Ordering
from ConversionErrors import UnitMismatch, UnsupportedUnit
from Domain import Domain
from Measurement import Measurement
from MeasurementConvertor import MeasurementConvertor
from NumberParser import parse_number


class MeasurementComparator:
    def __init__(self, config=None, convertor=None):
        self.convertor = convertor if convertor is not None else MeasurementConvertor(config)

    def compare(self, domain, value1, unit1, value2, unit2):
        """
        Compare `value1 unit1` with `value2 unit2` within `domain`.

        Returns
        -------
        ComparisonResult
            Canonical values (unrounded), canonical unit, rounded absolute
            difference and which measurement is larger.

        Raises
        ------
        InvalidNumber
            If either value is not a finite number.
        UnknownType
            If `domain` is not recognized.
        UnitMismatch
            If the two units belong to different domains.
        UnsupportedUnit
            If a unit is unknown or not part of `domain`.
        """
        first = Measurement(parse_number(value1), unit1)
        second = Measurement(parse_number(value2), unit2)

        domain = Domain.parse(domain)
        common_unit = self.convertor.get_common_unit(domain)
        self.check_units(domain, first.unit, second.unit)

        canonical1 = self.to_canonical(domain, first, common_unit)
        canonical2 = self.to_canonical(domain, second, common_unit)

        difference = self.convertor.round_value(domain, abs(canonical1 - canonical2))

        if canonical1 > canonical2:
            larger = Ordering.FIRST
        elif canonical2 > canonical1:
            larger = Ordering.SECOND
        else:
            larger = Ordering.EQUAL

        return ComparisonResult(
            value1=canonical1,
            value2=canonical2,
            unit=common_unit,
            difference=difference,
            larger=larger,
        )

    def compare_measurements(self, value1, unit1, value2, unit2):
        """
        Compare two measurements, inferring the domain from their units.
        """
        type1 = self.convertor.get_type_from_unit(unit1)
        type2 = self.convertor.get_type_from_unit(unit2)
        if type1 is None:
            raise UnsupportedUnit(unit1)
        if type2 is None:
            raise UnsupportedUnit(unit2)
        if type1 is not type2:
            raise UnitMismatch(unit1, type1, unit2, type2)
        return self.compare(type1, value1, unit1, value2, unit2)

    def check_units(self, domain, unit1, unit2):
        type1 = self.convertor.get_type_from_unit(unit1)
        type2 = self.convertor.get_type_from_unit(unit2)
        if type1 is not None and type2 is not None and type1 is not type2:
            raise UnitMismatch(unit1, type1, unit2, type2)
        for unit, owner in ((unit1, type1), (unit2, type2)):
            if owner is not domain:
                raise UnsupportedUnit(unit, domain)

    def to_canonical(self, domain, measurement, common_unit):
        if measurement.unit == common_unit:
            return measurement.value
        return self.convertor.convert_exact(domain, measurement.value, measurement.unit, common_unit)


if __name__ == "__main__":
    comparator = MeasurementComparator()
    print(comparator.compare("distance", "5", "km", "3", "mi"))
    print(comparator.compare_measurements("1000", "m", "0.9999999", "km"))
