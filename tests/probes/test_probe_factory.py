import pytest

from cacheprobe.kernel.model import ProcessorIdentity
from cacheprobe.probes.apple_silicon import AppleSiliconProbe
from cacheprobe.probes.factory import ProbeFactory
from cacheprobe.probes.intel_mac import IntelMacProbe
from cacheprobe.probes.linux import LinuxProbe
from cacheprobe.probes.unsupported import UnsupportedProbe
from cacheprobe.probes.windows import WindowsProbe

@pytest.mark.parametrize("os_name, architecture, expected", [
    ("macos", "Apple Silicon", AppleSiliconProbe),
    ("macos", "x86", IntelMacProbe),
    ("macos", "ARM", IntelMacProbe),
    ("linux", "x86", LinuxProbe),
    ("linux", "ARM", LinuxProbe),
    ("windows", "x86", WindowsProbe),
    ("windows", "ARM", WindowsProbe),
    ("freebsd", "x86", UnsupportedProbe),
    ("unknown", "Unknown: riscv64", UnsupportedProbe),
])
def test_factory_selects_strategy(os_name, architecture, expected, runner, reader):
    assert type(ProbeFactory.create(os_name, architecture, runner, reader)) is expected

def test_unsupported_probe_reports_diagnostic_and_no_levels(runner, reader):
    probe = ProbeFactory.create("plan9", "x86", runner, reader)
    info = probe.detect(ProcessorIdentity(architecture="x86", raw_architecture="x86_64"))

    assert info.performance_levels == []
    assert info.diagnostics == ["Unsupported operating system: plan9"]
    assert runner.calls == []
    assert reader.reads == []
