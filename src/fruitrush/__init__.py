"""Henry's Fruit Rush - a single-screen arcade game."""

__version__ = "0.1.0"
