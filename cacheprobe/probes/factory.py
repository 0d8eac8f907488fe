from cacheprobe.internal import constants
from cacheprobe.kernel.contracts import CommandRunner, FileReader
from cacheprobe.probes.apple_silicon import AppleSiliconProbe
from cacheprobe.probes.base import CacheProbe
from cacheprobe.probes.intel_mac import IntelMacProbe
from cacheprobe.probes.linux import LinuxProbe
from cacheprobe.probes.unsupported import UnsupportedProbe
from cacheprobe.probes.windows import WindowsProbe

class ProbeFactory:
    @staticmethod
    def create(os_name: str, architecture: str, runner: CommandRunner, reader: FileReader) -> CacheProbe:
        if os_name == constants.OS_MACOS:
            if architecture == constants.ARCH_APPLE_SILICON:
                return AppleSiliconProbe(runner, reader)
            return IntelMacProbe(runner, reader)
        elif os_name == constants.OS_LINUX:
            return LinuxProbe(runner, reader)
        elif os_name == constants.OS_WINDOWS:
            return WindowsProbe(runner, reader)
        else:
            return UnsupportedProbe(runner, reader, os_name)
