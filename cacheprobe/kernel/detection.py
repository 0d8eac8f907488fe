"""
This module composes a full detection run: identify the processor, pick the
cache probe for the host, and merge both results into one ProcessorInfo.
"""
from typing import Optional

from cacheprobe.adapters.process import SubprocessCommandRunner
from cacheprobe.adapters.storage_fs import FileSystemReader
from cacheprobe.internal.logging import get_logger
from cacheprobe.kernel.contracts import CommandRunner, FileReader
from cacheprobe.kernel.identity import identify
from cacheprobe.kernel.model import ProcessorIdentity, ProcessorInfo
from cacheprobe.probes.base import CacheProbe
from cacheprobe.probes.factory import ProbeFactory
from cacheprobe.runtime import system

logger = get_logger(__name__)


class ProcessorDetector:
    """
    Runs the two detection phases against injected collaborators.
    Host identifiers default to the running interpreter's platform.
    """
    def __init__(
        self,
        runner: CommandRunner,
        reader: FileReader,
        os_name: Optional[str] = None,
        raw_architecture: Optional[str] = None,
    ):
        self.runner = runner
        self.reader = reader
        self.os_name = os_name if os_name is not None else system.get_os_info()
        self.raw_architecture = raw_architecture if raw_architecture is not None else system.get_cpu_arch()

    def identify(self) -> ProcessorIdentity:
        return identify(self.raw_architecture, self.os_name, self.runner, self.reader)

    def select_probe(self, identity: ProcessorIdentity) -> CacheProbe:
        probe = ProbeFactory.create(self.os_name, identity.architecture, self.runner, self.reader)
        logger.debug("Cache probe selected", os=self.os_name, architecture=identity.architecture, probe=type(probe).__name__)
        return probe

    def detect(self) -> ProcessorInfo:
        identity = self.identify()
        return self.select_probe(identity).detect(identity)


def detect(runner: Optional[CommandRunner] = None, reader: Optional[FileReader] = None) -> ProcessorInfo:
    """Detect the running host's processor with the default subprocess and filesystem adapters."""
    detector = ProcessorDetector(
        runner=runner if runner is not None else SubprocessCommandRunner(),
        reader=reader if reader is not None else FileSystemReader(),
    )
    return detector.detect()
