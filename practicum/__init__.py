"""Programming exercises on numbers, units, bits and logic, and a logic circuit simulator."""

__version__ = "1.0.0"