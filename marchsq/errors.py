"""Errors — exception types raised by the contouring core.

All of them signal caller misuse rather than transient failure, so they
are raised immediately and never retried.  Each one also derives from
the matching built-in so plain ``except ValueError`` / ``IndexError``
handlers keep working.
"""

from __future__ import annotations


class MarchingSquaresError(Exception):
    """Base class for every marchsq error."""


class InvalidDimension(MarchingSquaresError, ValueError):
    """A grid dimension, stride, or tile size is not strictly positive."""


class OutOfRange(MarchingSquaresError, IndexError):
    """A sample or cell lookup falls outside the grid."""


class InvalidConfiguration(MarchingSquaresError, ValueError):
    """A configuration code outside the 4-bit range ``[0, 15]``."""
