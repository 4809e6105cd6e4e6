"""KNX device application layer: APDU service codes, encoding, parsing and the association table."""

__version__ = "0.1.1"