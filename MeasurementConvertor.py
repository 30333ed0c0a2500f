"""
Conversion facade over the distance, weight and temperature convertors.

Overview
--------
`MeasurementConvertor` is the entry point callers use to convert a value:

1. The value is parsed with `parse_number` (strict grammar, finite only).
2. Bare temperature conversions pick their units from the configuration.
3. The domain selects the convertor (`DistanceConvertor`, `WeightConvertor`,
   `TemperatureConvertor`).
4. The result is rounded to the precision configured for the domain.

Rounding
--------
Results are rounded half away from zero on the shortest decimal
representation of the float (`2.345 -> 2.35`, `-2.345 -> -2.35`), using
`decimal.ROUND_HALF_UP`, and returned as a float.
"""

import math
from decimal import Decimal, ROUND_HALF_UP, localcontext

from ConversionConfig import ConversionConfig
from ConversionErrors import InvalidNumber
from DistanceConvertor import DistanceConvertor
from Domain import Domain
from NumberParser import parse_number
from TemperatureConvertor import TemperatureConvertor
from WeightConvertor import WeightConvertor


class MeasurementConvertor:
    """
    Validate, dispatch and round conversions for every supported domain.
    """
    def __init__(self, config=None):
        """
        Parameters
        ----------
        config : ConversionConfig | None
            Default units and precision. Built-in defaults when omitted.
        """
        self.config = config if config is not None else ConversionConfig()
        self.convertors = {
            Domain.DISTANCE: DistanceConvertor(),
            Domain.WEIGHT: WeightConvertor(),
            Domain.TEMPERATURE: TemperatureConvertor(),
        }

    def get_units(self, domain=None):
        """
        Return the unit codes of `domain`, or of every domain keyed by domain.
        """
        if domain is not None:
            return list(self.convertors[Domain.parse(domain)].get_units())
        return {d: list(convertor.get_units()) for d, convertor in self.convertors.items()}

    def get_type_from_unit(self, unit):
        """
        Return the `Domain` that owns `unit`, or None for unrecognized codes.
        """
        for domain, convertor in self.convertors.items():
            if unit in convertor.get_units():
                return domain
        return None

    def get_common_unit(self, domain):
        """
        Return the canonical unit comparisons are normalized to (m, g or C).

        Raises
        ------
        UnknownType
            If `domain` is not recognized.
        """
        return Domain.parse(domain).canonical_unit

    def get_precision(self, domain):
        return self.config.precision_for(domain)

    def round_value(self, domain, value):
        places = self.get_precision(domain)
        if not math.isfinite(value):
            raise InvalidNumber(value)
        exact = Decimal(repr(float(value)))
        with localcontext() as ctx:
            # quantize needs room for every integer digit plus `places` decimals
            ctx.prec = max(ctx.prec, exact.adjusted() + places + 2)
            rounded = exact.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
        return float(rounded)

    def convert_exact(self, domain, value, from_unit=None, to_unit=None):
        """
        Convert `value` between units of `domain` without rounding.

        Raises
        ------
        InvalidNumber
            If `value` is not a finite number, or the converted value
            overflows to infinity.
        UnknownType
            If `domain` is not recognized.
        UnsupportedUnit
            If a unit is not part of `domain`.
        """
        number = parse_number(value)
        domain = Domain.parse(domain)

        if domain is Domain.TEMPERATURE:
            from_unit = from_unit or self.config.temperature_default_from
            to_unit = to_unit or self.config.temperature_default_to

        result = self.convertors[domain].convert(number, from_unit, to_unit)
        # finite input can still overflow once scaled, e.g. 1e308 km -> m
        if not math.isfinite(result):
            raise InvalidNumber(value)
        return result

    def convert(self, domain, value, from_unit=None, to_unit=None):
        """
        Convert `value` between units of `domain` and round it.

        Parameters
        ----------
        domain : Domain | str
            'distance', 'weight' or 'temperature'.
        value : float | int | str
            Quantity in `from_unit`; strings must match `parse_number`'s grammar.
        from_unit, to_unit : str | None
            Unit codes. Only temperature conversions may omit them; the
            configured defaults are used instead.

        Returns
        -------
        float
            Converted value rounded to the domain's configured precision.
        """
        result = self.convert_exact(domain, value, from_unit, to_unit)
        return self.round_value(domain, result)


if __name__ == "__main__":
    convertor = MeasurementConvertor()
    print(convertor.convert("weight", 100, "g", "oz"))
    print(convertor.convert("temperature", 37))
    print(convertor.get_type_from_unit("mi"))
