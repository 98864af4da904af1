"""Characteristic type classification.

Together with the characteristic code, the type forms the identity of a
characteristic within one resource: a resource may not carry two
characteristics with the same (code, type) pair.
"""

from enum import Enum


class CharacteristicType(str, Enum):
    """Kind of key/value characteristic attached to a resource."""

    CONSUMPTION_TYPE = "CONSUMPTION_TYPE"
    CHARGING_POINT = "CHARGING_POINT"
    CONNECTION_POINT_STATUS = "CONNECTION_POINT_STATUS"
