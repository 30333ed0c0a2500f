from Domain import Domain
from UnitConvertor import UnitConvertor


class DistanceConvertor(UnitConvertor):
    """
    Converts between meters, kilometers and miles via meters.
    """
    domain = Domain.DISTANCE
    canonical_unit = "m"

    def get_units(self):
        return {
            'm': 1,           # meters to meters
            'km': 1000,       # kilometers to meters
            'mi': 1609.344,   # international miles to meters
        }


def convert_distance(value, from_unit, to_unit):
    return DistanceConvertor().convert(value, from_unit, to_unit)


if __name__ == "__main__":
    print(convert_distance(1000, 'm', 'km'))
    print(convert_distance(1, 'mi', 'm'))
