from typing import List

from cacheprobe.internal.logging import get_logger
from cacheprobe.kernel.contracts import CommandRunner, FileReader
from cacheprobe.kernel.model import PerformanceLevel
from cacheprobe.probes.base import CacheProbe

logger = get_logger(__name__)


class UnsupportedProbe(CacheProbe):
    """No strategy for this OS: report nothing and leave a notice for stderr."""

    def __init__(self, runner: CommandRunner, reader: FileReader, os_name: str):
        super().__init__(runner, reader)
        self.os_name = os_name

    def collect_levels(self) -> List[PerformanceLevel]:
        message = f"Unsupported operating system: {self.os_name}"
        logger.debug("No cache detection strategy for this OS", os=self.os_name)
        self.diagnostics.append(message)
        return []
