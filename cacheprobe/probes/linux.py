import posixpath
from typing import List, Optional, Tuple

from cacheprobe.internal import constants
from cacheprobe.internal.logging import get_logger
from cacheprobe.kernel.contracts import CommandRunner, FileReader
from cacheprobe.kernel.model import PerformanceLevel
from cacheprobe.kernel.units import parse_size_with_unit, parse_uint
from cacheprobe.probes.base import CacheProbe

logger = get_logger(__name__)

_L1_FIELDS = {
    "Data": "data_size",
    "Instruction": "instruction_size",
    "Unified": "unified_size",
}


class LinuxProbe(CacheProbe):
    """
    Scans cpu0's sysfs cache directories (index0..index9).

    An index whose level, type or size cannot be read is skipped and the scan
    goes on, since kernels may expose fewer or non-contiguous indices. When
    two indices describe the same level and type, the later one wins.
    """

    def __init__(
        self,
        runner: CommandRunner,
        reader: FileReader,
        cache_root: str = constants.SYSFS_CACHE_ROOT,
        index_count: int = constants.SYSFS_CACHE_INDEX_COUNT,
    ):
        super().__init__(runner, reader)
        self.cache_root = str(cache_root)
        self.index_count = index_count

    def _read_index(self, index: int) -> Optional[Tuple[int, str, int]]:
        cache_dir = posixpath.join(self.cache_root, f"index{index}")
        values = []
        for attribute in ("level", "type", "size"):
            result = self.reader.read(posixpath.join(cache_dir, attribute))
            if not result.ok:
                logger.debug("Skipping cache index", index=index, attribute=attribute, error=result.error)
                return None
            values.append(result.text.strip())
        level, cache_type, size = values
        return parse_uint(level), cache_type, parse_size_with_unit(size)

    def collect_levels(self) -> List[PerformanceLevel]:
        proc_level = PerformanceLevel(name=constants.DEFAULT_LEVEL_NAME)

        for index in range(self.index_count):
            entry = self._read_index(index)
            if entry is None:
                continue
            level, cache_type, size = entry

            if level == 1:
                field_name = _L1_FIELDS.get(cache_type)
                if field_name is None:
                    logger.debug("Ignoring unknown L1 cache type", index=index, cache_type=cache_type)
                    continue
                setattr(proc_level.l1_cache, field_name, size)
            elif level == 2:
                proc_level.l2_cache = size
            elif level == 3:
                proc_level.l3_cache = size
            else:
                logger.debug("Ignoring cache level", index=index, level=level)

        return [proc_level]
