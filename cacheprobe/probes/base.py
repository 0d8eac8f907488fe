from abc import ABC, abstractmethod
from typing import List

from cacheprobe.internal import constants
from cacheprobe.internal.logging import get_logger
from cacheprobe.kernel.contracts import CommandRunner, FileReader
from cacheprobe.kernel.model import PerformanceLevel, ProcessorIdentity, ProcessorInfo
from cacheprobe.kernel.units import parse_uint

logger = get_logger(__name__)


class CacheProbe(ABC):
    """
    A cache detection strategy for one operating system / architecture pair.
    """

    def __init__(self, runner: CommandRunner, reader: FileReader):
        self.runner = runner
        self.reader = reader
        self.diagnostics: List[str] = []

    @abstractmethod
    def collect_levels(self) -> List[PerformanceLevel]:
        """
        Queries the host and returns the performance levels in display order.
        """
        pass

    def detect(self, identity: ProcessorIdentity) -> ProcessorInfo:
        levels = self.collect_levels()
        logger.debug(
            "Cache levels collected",
            probe=type(self).__name__,
            levels=[level.name for level in levels],
        )
        return ProcessorInfo.from_identity(identity, levels, self.diagnostics)

    def _sysctl(self, name: str):
        return self.runner.run(constants.SYSCTL_COMMAND, ["-n", name])

    def _sysctl_uint(self, name: str) -> int:
        result = self._sysctl(name)
        if not result.ok:
            logger.debug("sysctl query failed", name=name, error=result.error)
            return 0
        value = parse_uint(result.text)
        if value == 0 and result.text.strip() not in ("", "0"):
            logger.debug("sysctl value is not an integer", name=name, value=result.text.strip())
        return value
