"""Verbosity groups and the masks that select sub-groups within them.

A mask value packs a group number in its upper bits and an 8-bit mask in
its lowest byte: ``(group << 8) | mask``. A mask of ``0xFF`` covers the
whole group.
"""

from __future__ import annotations

from enum import IntEnum


class VerboGroup(IntEnum):
    """Top-level verbosity groups."""

    DEBUG = 0
    ERROR = 1
    GENERAL = 2

    ARG_PARSER = 3
    UNIT_TEST_ARG_PARSER = 4
    DATA_LOGGER = 5
    UNIT_TEST_DATA_LOGGER = 6
    FILE_IO = 7
    UNIT_TEST_FILE_IO = 8
    LOGGER = 9
    UNIT_TEST_LOGGER = 10
    TEXT_LOGGER = 11
    UNIT_TEST_TEXT_LOGGER = 12
    THREAD_SAFE_PROXY = 13
    UNIT_TEST_THREAD_SAFE_PROXY = 14
    MEM_IO = 15
    UNIT_TEST_MEM_IO = 16
    OPS = 17
    UNIT_TEST_OPS = 18
    RNG = 19
    UNIT_TEST_RNG = 20
    TIMER = 21
    UNIT_TEST_TIMER = 22
    YM_DEFS = 23
    UNIT_TEST_YM_DEFS = 24
    YM_ERROR = 25
    UNIT_TEST_YM_ERROR = 26
    YM_UTILS = 27
    UNIT_TEST_YM_UTILS = 28


def _msk(group: VerboGroup, mask: int = 0xFF) -> int:
    return (int(group) << 8) | mask


class VG(IntEnum):
    """Verbosity group masks."""

    DEBUG = _msk(VerboGroup.DEBUG)
    ERROR = _msk(VerboGroup.ERROR)
    GENERAL = _msk(VerboGroup.GENERAL)

    ARG_PARSER = _msk(VerboGroup.ARG_PARSER)
    UNIT_TEST_ARG_PARSER = _msk(VerboGroup.UNIT_TEST_ARG_PARSER)
    DATA_LOGGER = _msk(VerboGroup.DATA_LOGGER)
    UNIT_TEST_DATA_LOGGER = _msk(VerboGroup.UNIT_TEST_DATA_LOGGER)
    FILE_IO = _msk(VerboGroup.FILE_IO)
    UNIT_TEST_FILE_IO = _msk(VerboGroup.UNIT_TEST_FILE_IO)
    LOGGER = _msk(VerboGroup.LOGGER)
    UNIT_TEST_LOGGER = _msk(VerboGroup.UNIT_TEST_LOGGER)
    TEXT_LOGGER = _msk(VerboGroup.TEXT_LOGGER)
    UNIT_TEST_TEXT_LOGGER = _msk(VerboGroup.UNIT_TEST_TEXT_LOGGER)
    TEXT_LOGGER_BASIC = _msk(VerboGroup.TEXT_LOGGER, 0b0000_0001)
    TEXT_LOGGER_DETAIL = _msk(VerboGroup.TEXT_LOGGER, 0b0000_0010)
    THREAD_SAFE_PROXY = _msk(VerboGroup.THREAD_SAFE_PROXY)
    UNIT_TEST_THREAD_SAFE_PROXY = _msk(VerboGroup.UNIT_TEST_THREAD_SAFE_PROXY)
    MEM_IO = _msk(VerboGroup.MEM_IO)
    UNIT_TEST_MEM_IO = _msk(VerboGroup.UNIT_TEST_MEM_IO)
    OPS = _msk(VerboGroup.OPS)
    UNIT_TEST_OPS = _msk(VerboGroup.UNIT_TEST_OPS)
    RNG = _msk(VerboGroup.RNG)
    UNIT_TEST_RNG = _msk(VerboGroup.UNIT_TEST_RNG)
    RNG_PRNG = _msk(VerboGroup.RNG, 0b0000_0001)
    RNG_TRNG = _msk(VerboGroup.RNG, 0b0000_0010)
    TIMER = _msk(VerboGroup.TIMER)
    UNIT_TEST_TIMER = _msk(VerboGroup.UNIT_TEST_TIMER)
    YM_DEFS = _msk(VerboGroup.YM_DEFS)
    UNIT_TEST_YM_DEFS = _msk(VerboGroup.UNIT_TEST_YM_DEFS)
    YM_ERROR = _msk(VerboGroup.YM_ERROR)
    UNIT_TEST_YM_ERROR = _msk(VerboGroup.UNIT_TEST_YM_ERROR)
    YM_ERROR_ASSERT = _msk(VerboGroup.YM_ERROR, 0b0000_0001)
    YM_UTILS = _msk(VerboGroup.YM_UTILS)
    UNIT_TEST_YM_UTILS = _msk(VerboGroup.UNIT_TEST_YM_UTILS)


def n_groups() -> int:
    """Return the number of verbosity groups."""
    return len(VerboGroup)


def get_group(vg: int) -> VerboGroup:
    """Return the group that a mask belongs to."""
    return VerboGroup(int(vg) >> 8)


def get_mask(vg: int) -> int:
    """Return the 8-bit sub-group mask of a mask value."""
    return int(vg) & 0xFF