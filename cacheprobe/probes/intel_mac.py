from typing import List

from cacheprobe.internal import constants
from cacheprobe.kernel.model import PerformanceLevel
from cacheprobe.kernel.units import parse_uint
from cacheprobe.probes.base import CacheProbe


class IntelMacProbe(CacheProbe):
    """
    Single "Default" level. Prefers the unified hw.l1cachesize and falls back
    to the split instruction/data keys when it is missing or empty.
    """

    def collect_levels(self) -> List[PerformanceLevel]:
        level = PerformanceLevel(name=constants.DEFAULT_LEVEL_NAME)

        unified = self._sysctl(constants.SYSCTL_L1)
        if unified.ok and unified.text.strip():
            level.l1_cache.unified_size = parse_uint(unified.text)
        else:
            level.l1_cache.instruction_size = self._sysctl_uint(constants.SYSCTL_L1I)
            level.l1_cache.data_size = self._sysctl_uint(constants.SYSCTL_L1D)

        level.l2_cache = self._sysctl_uint(constants.SYSCTL_L2)
        level.l3_cache = self._sysctl_uint(constants.SYSCTL_L3)
        return [level]
