from Domain import Domain
from UnitConvertor import UnitConvertor


class WeightConvertor(UnitConvertor):
    """
    Converts between grams, ounces and pounds via grams.
    """
    domain = Domain.WEIGHT
    canonical_unit = "g"

    def get_units(self):
        return {
            'g': 1,           # grams to grams
            'oz': 28.3495,    # ounces to grams
            'lb': 453.592,    # pounds to grams
        }


def convert_weight(value, from_unit, to_unit):
    return WeightConvertor().convert(value, from_unit, to_unit)


if __name__ == "__main__":
    print(convert_weight(100, 'g', 'oz'))
    print(convert_weight(2, 'lb', 'g'))
