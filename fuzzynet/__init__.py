"""Fuzzy sets, inference engines, defuzzifiers, fuzzy logic systems and networks of them."""

__version__ = "3.0.0"