# parcel_match/core/domain/errors.py

"""Exceptions raised by collaborators around the matching engine

The matching engine itself never raises; these cover table loading and
configuration problems that callers need to surface.
"""


class ParcelMatchError(Exception):
    """Base class for parcel_match errors"""


class ReferenceTableError(ParcelMatchError):
    """Reference table could not be read or parsed"""


class ConfigurationError(ParcelMatchError, ValueError):
    """Invalid configuration value, e.g. an unknown matching policy"""
