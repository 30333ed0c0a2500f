"""
Configuration for the conversion engine.

`ConversionConfig` is an immutable value built once per process and passed to
`MeasurementConvertor` and `MeasurementComparator`. It holds:

- the default temperature units used when a bare temperature conversion is
  requested without units,
- the precision (decimal places) results are rounded to, either one global
  number or a per-domain mapping.

File format (JSON)
------------------
    {
        "temperature": {"defaultFrom": "C", "defaultTo": "F"},
        "precision": {"distance": 2, "weight": 2, "temperature": 2}
    }

`precision` may also be a single integer. Every field is optional.

Environment variables (optional)
--------------------------------
- MEASUREMENT_CONVERTOR_CONFIG
    Path of the JSON file to load when no explicit path is given. Values in a
    local `.env` file are honored via python-dotenv.
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Union

from dotenv import load_dotenv

from ConversionErrors import InvalidConfiguration
from Domain import Domain

DEFAULT_PRECISION = 2
DEFAULT_CONFIG_PATH = Path("./config/defaults.json")
CONFIG_ENV_VAR = "MEASUREMENT_CONVERTOR_CONFIG"
TEMPERATURE_UNITS = ("C", "F", "K")


@dataclass(frozen=True)
class ConversionConfig:
    temperature_default_from: str = "C"
    temperature_default_to: str = "F"
    precision: Union[int, Mapping[str, int], None] = None

    def __post_init__(self):
        for unit in (self.temperature_default_from, self.temperature_default_to):
            if unit not in TEMPERATURE_UNITS:
                raise InvalidConfiguration(f"Default temperature unit must be one of {', '.join(TEMPERATURE_UNITS)}, got {unit!r}")

        precision = self.precision
        if isinstance(precision, Mapping):
            checked = {}
            for key, places in precision.items():
                try:
                    domain = Domain.parse(key)
                except ValueError:
                    raise InvalidConfiguration(f"Unknown precision key: {key!r}") from None
                checked[domain.value] = _check_places(places, domain.value)
            # Bypass the frozen guard to store a read-only copy.
            object.__setattr__(self, "precision", MappingProxyType(checked))
        elif precision is not None:
            _check_places(precision, "all domains")

    def precision_for(self, domain):
        """
        Return the number of decimal places for `domain`.

        A per-domain mapping without an entry for `domain`, or no precision
        setting at all, falls back to `DEFAULT_PRECISION`.
        """
        domain = Domain.parse(domain)
        if isinstance(self.precision, Mapping):
            return self.precision.get(domain.value, DEFAULT_PRECISION)
        if self.precision is None:
            return DEFAULT_PRECISION
        return self.precision

    @classmethod
    def from_dict(cls, data):
        """
        Build a config from the JSON-shaped mapping described in the module docstring.

        Raises
        ------
        InvalidConfiguration
            If the mapping has the wrong shape or holds invalid values.
        """
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise InvalidConfiguration("Configuration must be a JSON object.")

        temperature = data.get("temperature", {})
        if temperature is None:
            temperature = {}
        if not isinstance(temperature, Mapping):
            raise InvalidConfiguration("'temperature' must be an object.")

        return cls(
            temperature_default_from=temperature.get("defaultFrom", "C"),
            temperature_default_to=temperature.get("defaultTo", "F"),
            precision=data.get("precision"),
        )

    @classmethod
    def load(cls, path=None):
        """
        Load configuration from a JSON file.

        Path resolution order: `path`, then the MEASUREMENT_CONVERTOR_CONFIG
        environment variable, then ./config/defaults.json. Built-in defaults
        are used if the default file does not exist; an explicitly named file
        that does not exist is an error.
        """
        load_dotenv()
        explicit = path or os.getenv(CONFIG_ENV_VAR)
        config_path = Path(explicit) if explicit else DEFAULT_CONFIG_PATH

        if not config_path.is_file():
            if explicit:
                raise InvalidConfiguration(f"Config file not found: {config_path}")
            return cls()

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidConfiguration(f"Config file {config_path} is not valid JSON: {e}") from e

        return cls.from_dict(data)


def _check_places(places, name):
    if isinstance(places, bool) or not isinstance(places, int) or places < 0:
        raise InvalidConfiguration(f"Precision for {name} must be a non-negative integer, got {places!r}")
    return places


if __name__ == "__main__":
    config = ConversionConfig.load()
    print(config)
    for domain in Domain:
        print(domain, config.precision_for(domain))
