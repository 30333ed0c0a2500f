import argparse
import sys

from ComparisonResult import Ordering
from ConversionConfig import ConversionConfig
from ConversionErrors import ConversionError, UnsupportedUnit
from MeasurementComparator import MeasurementComparator
from MeasurementConvertor import MeasurementConvertor


"""
Command-line front end for the measurement convertor.

Usage
-----
    convert <type> <value> [from] [to]
    convert compare <value1> <unit1> <value2> <unit2>

Examples
--------
    convert distance 5 km mi        -> 3.11
    convert temperature 37          -> 98.6 (C -> F from the config defaults)
    convert compare 5 km 3 mi

Key behavior
------------
- Configuration is loaded once (`--config PATH`, the
  MEASUREMENT_CONVERTOR_CONFIG variable, or ./config/defaults.json) and
  handed to the convertor and comparator.
- Results go to stdout; errors go to stderr as "Error: <message>".
- Exit status: 0 on success, 1 on any conversion error, 2 on usage errors.
"""

USAGE = (
    "Usage: convert <type> <value> [from] [to]\n"
    "   or: convert compare <value1> <unit1> <value2> <unit2>"
)


def format_number(value):
    return int(value) if float(value).is_integer() else value


class Main:
    """
    Wires a loaded configuration into the convertor and comparator and
    dispatches a parsed command line to them.
    """
    def __init__(self, config):
        self.convertor = MeasurementConvertor(config)
        self.comparator = MeasurementComparator(convertor=self.convertor)

    def run(self, command, args):
        if command == "compare":
            return self.compare(args)
        return self.convert(command, args)

    def convert(self, type_name, args):
        if not args or len(args) > 3:
            print(USAGE, file=sys.stderr)
            return 1

        value, from_unit, to_unit = (list(args) + [None, None])[:3]
        try:
            result = self.convertor.convert(type_name, value, from_unit, to_unit)
        except ConversionError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

        print(format_number(result))
        return 0

    def compare(self, args):
        if len(args) != 4:
            print("Usage: convert compare <value1> <unit1> <value2> <unit2>", file=sys.stderr)
            print("Example: convert compare 5 km 3 mi", file=sys.stderr)
            return 1

        value1, unit1, value2, unit2 = args
        try:
            result = self.comparator.compare_measurements(value1, unit1, value2, unit2)
        except UnsupportedUnit:
            self.print_supported_units()
            return 1
        except ConversionError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

        domain = self.convertor.get_type_from_unit(unit1)
        common_unit = result.unit
        shown1 = format_number(self.convertor.round_value(domain, result.value1))
        shown2 = format_number(self.convertor.round_value(domain, result.value2))
        difference = format_number(result.difference)

        print(f"{value1} {unit1} = {shown1} {common_unit}")
        print(f"{value2} {unit2} = {shown2} {common_unit}")
        print(f"Difference: {difference} {common_unit}")

        if result.larger is Ordering.FIRST:
            print(f"{value1} {unit1} is larger by {difference} {common_unit}")
        elif result.larger is Ordering.SECOND:
            print(f"{value2} {unit2} is larger by {difference} {common_unit}")
        else:
            print("Both values are equal")
        return 0

    def print_supported_units(self):
        print("Error: Unknown unit(s). Supported units:", file=sys.stderr)
        for domain, units in self.convertor.get_units().items():
            print(f"  {domain.value.capitalize()}: {', '.join(units)}", file=sys.stderr)


def build_parser():
    p = argparse.ArgumentParser(
        prog="convert",
        description="Convert and compare distance, weight and temperature measurements.",
        usage=USAGE.replace("Usage: ", "", 1),
    )
    p.add_argument("--config", type=str, default=None,
                   help="Path to a JSON config file (default: ./config/defaults.json)")
    p.add_argument("command", type=str, help="distance, weight, temperature or compare")
    # REMAINDER keeps values such as -2.5e3 from being read as options
    p.add_argument("args", nargs=argparse.REMAINDER, help="Value and units for the command")
    return p


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        config = ConversionConfig.load(args.config)
    except ConversionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return Main(config).run(args.command, args.args)


if __name__ == "__main__":
    sys.exit(main())
