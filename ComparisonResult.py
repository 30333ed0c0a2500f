from dataclasses import dataclass
from enum import IntEnum

class Ordering(IntEnum):
    EQUAL = 0
    FIRST = 1
    SECOND = 2


@dataclass(frozen=True)
class ComparisonResult:
    value1: float
    value2: float
    unit: str
    difference: float
    larger: Ordering


    @property
    def unit1(self):
        return self.unit

    @property
    def unit2(self):
        return self.unit


    def __str__(self):
        if self.larger is Ordering.FIRST:
            verdict = "first is larger"
        elif self.larger is Ordering.SECOND:
            verdict = "second is larger"
        else:
            verdict = "equal"

        result_str = (
            f"Value 1 = {self.value1} {self.unit}, "
            f"Value 2 = {self.value2} {self.unit}, "
            f"Difference = {self.difference} {self.unit}, "
            f"Verdict = {verdict}"
        )
        return result_str
