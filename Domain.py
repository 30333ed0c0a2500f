from enum import Enum

from ConversionErrors import UnknownType


class Domain(Enum):
    """
    The physical quantities the convertors understand.

    Each member carries its tag (the value used on the command line and in
    configuration files) and the canonical unit every conversion in that
    domain passes through.
    """
    DISTANCE = "distance"
    WEIGHT = "weight"
    TEMPERATURE = "temperature"

    @property
    def canonical_unit(self):
        return CANONICAL_UNITS[self]

    @classmethod
    def parse(cls, type_name):
        """
        Return the `Domain` for a tag string, or the member itself if one is given.

        Raises
        ------
        UnknownType
            If `type_name` is not one of the three recognized tags.
        """
        if isinstance(type_name, cls):
            return type_name
        try:
            return cls(type_name)
        except ValueError:
            raise UnknownType(type_name) from None

    def __str__(self):
        return self.value


CANONICAL_UNITS = {
    Domain.DISTANCE: "m",
    Domain.WEIGHT: "g",
    Domain.TEMPERATURE: "C",
}
