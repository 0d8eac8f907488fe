import importlib.metadata

import pytest
from typer.testing import CliRunner

from cacheprobe.cli.main import app
from cacheprobe.kernel.model import CacheInfo, PerformanceLevel, ProcessorInfo

runner = CliRunner()

@pytest.fixture
def linux_info():
    return ProcessorInfo(
        architecture="x86",
        raw_architecture="x86_64",
        model_name="Intel(R) Xeon(R) Platinum 8490H",
        performance_levels=[
            PerformanceLevel(
                name="Default",
                l1_cache=CacheInfo(instruction_size=32768, data_size=49152),
                l2_cache=2 * 1024 * 1024,
                l3_cache=112 * 1024 * 1024 + 512 * 1024,
            )
        ],
    )

@pytest.fixture
def fake_detect(mocker, linux_info):
    return mocker.patch("cacheprobe.kernel.detection.detect", return_value=linux_info)

def test_report_prints_full_report(fake_detect):
    result = runner.invoke(app, [])

    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        "Architecture: x86 - x86_64",
        "CPU Model: Intel(R) Xeon(R) Platinum 8490H",
        "",
        "Cache Information:",
        "==================",
        "",
        "Default",
        "-------",
        "L1 Instruction Cache: 32.00 KB",
        "L1 Data Cache: 48.00 KB",
        "L2 Cache: 2.00 MB",
        "L3 Cache: 112.50 MB",
    ]
    fake_detect.assert_called_once_with()

def test_unsupported_os_notice_goes_to_stderr(mocker):
    info = ProcessorInfo(
        architecture="x86",
        raw_architecture="x86_64",
        diagnostics=["Unsupported operating system: haiku"],
    )
    mocker.patch("cacheprobe.kernel.detection.detect", return_value=info)

    result = runner.invoke(app, [])

    assert result.exit_code == 0
    assert result.stderr == "Unsupported operating system: haiku\n"
    assert "Unsupported operating system" not in result.stdout
    assert result.stdout.splitlines()[-1] == "=================="

def test_unsupported_os_through_real_detection(mocker):
    mocker.patch("cacheprobe.runtime.system.get_os_info", return_value="haiku")
    mocker.patch("cacheprobe.runtime.system.get_cpu_arch", return_value="x86_64")

    result = runner.invoke(app, [])

    assert result.exit_code == 0
    assert result.stderr.splitlines() == ["Unsupported operating system: haiku"]
    assert result.stdout.startswith("Architecture: x86 - x86_64\n")

def test_io_error_exits_non_zero(mocker):
    mocker.patch("cacheprobe.kernel.detection.detect", side_effect=OSError("broken pipe"))

    result = runner.invoke(app, [])

    assert result.exit_code == 1
    assert "Cache detection failed: broken pipe" in result.stderr
    assert result.stdout == ""

def test_report_on_this_host_never_fails():
    result = runner.invoke(app, [])

    assert result.exit_code == 0
    assert result.stdout.startswith("Architecture: ")
    assert "Cache Information:\n==================" in result.stdout

def test_extra_argument_is_rejected(fake_detect):
    result = runner.invoke(app, ["extra-arg"])
    assert result.exit_code != 0
    fake_detect.assert_not_called()

def test_help(fake_detect):
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "--version" in result.stdout
    fake_detect.assert_not_called()

def test_version(mocker, fake_detect):
    mocker.patch("importlib.metadata.version", return_value="1.2.3")

    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert result.stdout.strip() == "cacheprobe version: 1.2.3"
    fake_detect.assert_not_called()

def test_version_without_metadata(mocker, fake_detect):
    mocker.patch("importlib.metadata.version", side_effect=importlib.metadata.PackageNotFoundError("cacheprobe"))

    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 1
    assert "not installed" in result.stderr
    fake_detect.assert_not_called()
