"""
Linear unit conversion through a canonical unit.

This module defines `UnitConvertor`, the base class for domains whose units
are related to each other by a pure scale factor. Subclasses provide the
unit table (`get_units`) and the canonical unit; conversion normalizes the
value to the canonical unit, then scales it to the target unit.

Canonical units used by subclasses
----------------------------------
- Distance: meters (m)
- Weight: grams (g)

Notes & caveats
---------------
- Unit keys are case-sensitive.
- No rounding happens here; rounding is applied by `MeasurementConvertor`.
- Converting a unit to itself returns the value untouched, so identity
  conversions never drift through floating-point round trips.
"""

from ConversionErrors import UnsupportedUnit


class UnitConvertor:
    """
    Provide unit factors and basic conversion using a domain's canonical unit.
    """
    domain = None
    canonical_unit = None

    def get_units(self):
        """
        Return the unit-to-canonical multiplier mapping.

        Returns
        -------
        dict[str, float | int]
            Multipliers that convert one of a unit into the canonical unit.
        """
        return {}

    def to_canonical(self, value, unit):
        units = self.get_units()
        if unit not in units:
            raise UnsupportedUnit(unit, self.domain)
        return value * units[unit]

    def from_canonical(self, value, unit):
        units = self.get_units()
        if unit not in units:
            raise UnsupportedUnit(unit, self.domain)
        return value / units[unit]

    def convert(self, value, from_unit, to_unit):
        """
        Convert a numeric `value` from `from_unit` to `to_unit`.

        Parameters
        ----------
        value : float | int
            Quantity expressed in `from_unit`.
        from_unit : str
            Source unit key (e.g., 'km', 'oz').
        to_unit : str
            Target unit key (same convention as above).

        Returns
        -------
        float
            Converted value in `to_unit`.

        Raises
        ------
        UnsupportedUnit
            If either unit is not in this convertor's table.
        """
        # Convert to the canonical unit (m or g).
        canonical_value = self.to_canonical(value, from_unit)
        if from_unit == to_unit:
            return value
        # Scale from the canonical unit to the target unit.
        return self.from_canonical(canonical_value, to_unit)
