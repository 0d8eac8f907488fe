from typing import List

from cacheprobe.internal import constants
from cacheprobe.internal.logging import get_logger
from cacheprobe.kernel.model import PerformanceLevel
from cacheprobe.kernel.units import KIB, parse_uint
from cacheprobe.probes.base import CacheProbe

logger = get_logger(__name__)


class WindowsProbe(CacheProbe):
    """
    Parses `wmic cpu get L1CacheSize,L2CacheSize,L3CacheSize /value`.
    wmic reports KiB; L1 has no instruction/data split at this granularity
    and is stored as unified. A key with a non-numeric value keeps whatever
    an earlier line set.
    """

    def collect_levels(self) -> List[PerformanceLevel]:
        level = PerformanceLevel(name=constants.DEFAULT_LEVEL_NAME)

        result = self.runner.run(constants.WMIC_COMMAND, list(constants.WMIC_CACHE_ARGS))
        if not result.ok:
            logger.debug("wmic cache query failed", error=result.error)
            return [level]

        for line in result.text.splitlines():
            key, sep, value = line.partition("=")
            if not sep or key not in ("L1CacheSize", "L2CacheSize", "L3CacheSize"):
                continue
            if not value.strip().isdigit():
                logger.debug("Ignoring non-numeric wmic value", key=key, value=value.strip())
                continue
            size = parse_uint(value) * KIB
            if key == "L1CacheSize":
                level.l1_cache.unified_size = size
            elif key == "L2CacheSize":
                level.l2_cache = size
            else:
                level.l3_cache = size

        return [level]
