"""Group operations on the Edwards form of Curve25519."""

__version__ = "0.1.0"

__all__ = [
    "constants",
    "edwards",
    "field",
    "multiscalar",
    "pippenger",
    "scalar",
    "straus",
]