"""
Helpers for assigning possibly-None values to protobuf scalar fields,
which cannot hold None.
"""
from __future__ import division
from __future__ import print_function
from __future__ import unicode_literals


def string(value):
    """
    Returns the empty string when value is None, and value otherwise.
    """
    if value is None:
        return ""
    return value


def int(value):
    """
    Returns zero when value is None, and value otherwise.
    """
    if value is None:
        return 0
    return value
