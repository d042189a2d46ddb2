"""Test helpers package for the Homebrew updater test suite."""

from .formula_factory import FORMULA_TEXT, formula_record, make_formula

__all__ = [
    "FORMULA_TEXT",
    "formula_record",
    "make_formula",
]
