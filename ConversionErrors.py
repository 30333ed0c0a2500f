"""
Error types raised by the conversion engine.

All errors derive from `ConversionError`, itself a `ValueError`, so callers
that only care about "bad input" can catch `ValueError` as before.

Kinds
-----
- InvalidNumber: value is not a finite number (or not parseable as one).
- UnsupportedUnit: unit code is not known to a convertor.
- UnknownType: domain tag is not distance, weight or temperature.
- UnitMismatch: the two units of a comparison belong to different domains.
- InvalidConfiguration: the configuration file or mapping is malformed.
"""


class ConversionError(ValueError):
    """Base class for every error raised by the conversion engine."""


class InvalidNumber(ConversionError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid number provided: {value!r}")


class UnsupportedUnit(ConversionError):
    def __init__(self, unit, domain=None):
        self.unit = unit
        self.domain = domain
        if domain:
            super().__init__(f"Unsupported {domain} unit: {unit}")
        else:
            super().__init__(f"Unsupported unit: {unit}")


class UnknownType(ConversionError):
    def __init__(self, type_name):
        self.type_name = type_name
        super().__init__(f"Unknown type: {type_name}")


class UnitMismatch(ConversionError):
    def __init__(self, unit1, type1, unit2, type2):
        self.unit1 = unit1
        self.unit2 = unit2
        self.type1 = type1
        self.type2 = type2
        super().__init__(f"Cannot compare {type1} ({unit1}) with {type2} ({unit2})")


class InvalidConfiguration(ConversionError):
    pass
