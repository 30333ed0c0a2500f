from dataclasses import dataclass

@dataclass(frozen=True)
class Measurement:
    value: float
    unit: str


    def __str__(self):
        value = int(self.value) if float(self.value).is_integer() else self.value
        return f"{value} {self.unit}"
