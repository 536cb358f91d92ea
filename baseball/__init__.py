"""
Number Baseball Game Package

A console bulls-and-cows game: guess a secret number of distinct digits
from strike and ball hints. The package is split into configuration,
data models, services (guess engine, user registry), game states and
console/logging utilities.
"""

__version__ = "1.0.0"
