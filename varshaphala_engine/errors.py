"""
errors.py
=========
Exceptions raised by the Varshaphala engine.

Only InvalidTargetYearError and InvalidNatalChartError ever leave the
engine. MissingBodyError is raised by the per-item lookups and caught one
level up, where the single dependent item (one Saham, one aspect pair,
one bala row) is skipped and logged.
"""


class VarshaphalaError(Exception):
    """Base class for all engine errors."""


class InvalidTargetYearError(VarshaphalaError, ValueError):
    """Target year precedes the birth year."""

    def __init__(self, target_year: int, birth_year: int):
        self.target_year = target_year
        self.birth_year = birth_year
        super().__init__(
            f"target_year {target_year} is before birth year {birth_year}"
        )


class InvalidNatalChartError(VarshaphalaError, ValueError):
    """Natal chart violates a range invariant (longitude, house, pada)."""


class MissingBodyError(VarshaphalaError, KeyError):
    """A referenced body has no position in the chart."""

    def __init__(self, body):
        self.body = body
        super().__init__(str(body))

    def __str__(self):
        return f"no position for {self.body}"
