from typing import List

from cacheprobe.internal import constants
from cacheprobe.kernel.model import PerformanceLevel
from cacheprobe.kernel.units import parse_uint
from cacheprobe.probes.base import CacheProbe


def level_name(index: int) -> str:
    if index == 0:
        return constants.PERFORMANCE_LEVEL_NAME
    return constants.EFFICIENCY_LEVEL_NAME.format(index=index)


class AppleSiliconProbe(CacheProbe):
    """
    Reads per-tier cache sizes from the hw.perflevelN sysctl tree.
    L3 (hw.l3cachesize) is shared, so it is only recorded on tier 0.
    """

    def perf_level_count(self) -> int:
        result = self._sysctl(constants.SYSCTL_PERF_LEVEL_COUNT)
        text = result.text.strip() if result.ok else ""
        if not (text.isascii() and text.isdigit()):
            return 1
        return parse_uint(text)

    def collect_levels(self) -> List[PerformanceLevel]:
        levels = []
        for index in range(self.perf_level_count()):
            level = PerformanceLevel(name=level_name(index))
            level.l1_cache.instruction_size = self._sysctl_uint(constants.SYSCTL_PERF_LEVEL_L1I.format(index=index))
            level.l1_cache.data_size = self._sysctl_uint(constants.SYSCTL_PERF_LEVEL_L1D.format(index=index))
            level.l2_cache = self._sysctl_uint(constants.SYSCTL_PERF_LEVEL_L2.format(index=index))
            if index == 0:
                level.l3_cache = self._sysctl_uint(constants.SYSCTL_L3)
            levels.append(level)
        return levels
