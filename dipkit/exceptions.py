# -*- coding: utf-8 -*-
"""
dipkit Exception Hierarchy - Domain-specific exceptions for buffer and
image operations.

Provides a small exception hierarchy that lets callers catch dipkit
errors distinctly from Python built-in exceptions. All dipkit exceptions
subclass both ``DipkitError`` and the closest built-in exception, so code
that already catches ``ValueError`` or ``IndexError`` keeps working.

Author
------
Steven Siebert

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-02-06

Modified
--------
2026-03-02
"""


class DipkitError(Exception):
    """Base exception for all dipkit errors."""


class InvalidArgumentError(DipkitError, ValueError):
    """Invalid parameter or malformed construction argument.

    Raised for non-positive zoom scales, negative dimensions, channel
    counts below one, and tunable parameters outside their declared
    range or choices.
    """


class OutOfRangeError(DipkitError, IndexError):
    """Coordinate or index outside the valid bounds of a checked accessor."""


class ChannelOutOfRangeError(OutOfRangeError):
    """Channel index outside ``[0, channels)``."""


class InvalidRegionError(DipkitError, ValueError):
    """Sub-region rectangle not fully contained in the buffer."""


class UnsupportedTypeError(DipkitError, TypeError):
    """Operation requested on an element type it does not implement.

    Also raised by the checked accessor tier when the requested element
    type does not match the buffer's declared type.
    """


class UnsupportedConversionError(UnsupportedTypeError):
    """Element-type conversion pair not implemented."""


class ChannelMismatchError(DipkitError, ValueError):
    """Channel-merge inputs disagree in size, element type or channels."""


class ProcessorError(DipkitError, RuntimeError):
    """Algorithm failure during execution.

    Raised when an algorithm encounters a non-recoverable numeric
    condition (e.g. a singular normal-equation system), as opposed to an
    input validation issue.
    """
