"""
Temperature conversion between Celsius, Fahrenheit and Kelvin.

Unlike distance and weight, these units are related by affine maps, so a
scale table is not enough. Every conversion goes through Celsius:

    F -> C: (F - 32) * 5/9        C -> F: C * 9/5 + 32
    K -> C: K - 273.15            C -> K: C + 273.15
"""

from ConversionErrors import UnsupportedUnit
from Domain import Domain


class TemperatureConvertor:
    domain = Domain.TEMPERATURE
    canonical_unit = "C"

    def get_units(self):
        return ['C', 'F', 'K']

    def to_celsius(self, value, unit):
        match unit:
            case 'C':
                return value
            case 'F':
                return (value - 32) * 5 / 9
            case 'K':
                return value - 273.15
            case _:
                raise UnsupportedUnit(unit, self.domain)

    def from_celsius(self, value, unit):
        match unit:
            case 'C':
                return value
            case 'F':
                return value * 9 / 5 + 32
            case 'K':
                return value + 273.15
            case _:
                raise UnsupportedUnit(unit, self.domain)

    def convert(self, value, from_unit, to_unit):
        """
        Convert `value` from `from_unit` to `to_unit` (both in C, F, K).

        Raises
        ------
        UnsupportedUnit
            If either unit is not a temperature unit.
        """
        celsius = self.to_celsius(value, from_unit)
        if from_unit == to_unit:
            return value
        return self.from_celsius(celsius, to_unit)


def convert_temperature(value, from_unit, to_unit):
    return TemperatureConvertor().convert(value, from_unit, to_unit)


if __name__ == "__main__":
    print(convert_temperature(37, 'C', 'F'))
    print(convert_temperature(300, 'K', 'C'))
