"""
Architecture and model-name identification.

Every query here is best effort: a failed command or unreadable file only
leaves the model name empty or the ARM label unrefined.
"""
from cacheprobe.internal import constants
from cacheprobe.internal.logging import get_logger
from cacheprobe.kernel.contracts import CommandRunner, FileReader
from cacheprobe.kernel.model import ProcessorIdentity

logger = get_logger(__name__)

_X86_ARCHES = {"x86", "x86_64"}
_ARM_ARCHES = {"aarch64", "arm", "arm64"}


def _brand_string(runner: CommandRunner) -> str:
    result = runner.run(constants.SYSCTL_COMMAND, ["-n", constants.SYSCTL_BRAND_STRING])
    if not result.ok:
        logger.debug("CPU brand string unavailable", error=result.error)
        return ""
    return result.text.strip()


def detect_arm_type(os_name: str, runner: CommandRunner) -> str:
    """Apple Silicon when the macOS brand string says so, plain ARM otherwise."""
    if os_name == constants.OS_MACOS and "Apple" in _brand_string(runner):
        return constants.ARCH_APPLE_SILICON
    return constants.ARCH_ARM


def detect_architecture(raw_architecture: str, os_name: str, runner: CommandRunner) -> str:
    if raw_architecture in _X86_ARCHES:
        return constants.ARCH_X86
    if raw_architecture in _ARM_ARCHES:
        return detect_arm_type(os_name, runner)
    return f"Unknown: {raw_architecture}"


def _model_name_from_cpuinfo(reader: FileReader) -> str:
    result = reader.read(constants.PROC_CPUINFO_PATH)
    if not result.ok:
        logger.debug("cpuinfo unavailable", error=result.error)
        return ""
    for line in result.text.splitlines():
        if line.startswith("model name"):
            _, sep, value = line.partition(":")
            if sep:
                return value.strip()
    return ""


def _model_name_from_wmic(runner: CommandRunner) -> str:
    result = runner.run(constants.WMIC_COMMAND, list(constants.WMIC_NAME_ARGS))
    if not result.ok:
        logger.debug("wmic name query failed", error=result.error)
        return ""
    for line in result.text.splitlines():
        if line.startswith("Name="):
            return line[len("Name="):].strip()
    return ""


def detect_model_name(os_name: str, runner: CommandRunner, reader: FileReader) -> str:
    if os_name == constants.OS_LINUX:
        return _model_name_from_cpuinfo(reader)
    if os_name == constants.OS_MACOS:
        return _brand_string(runner)
    if os_name == constants.OS_WINDOWS:
        return _model_name_from_wmic(runner)
    return ""


def identify(
    raw_architecture: str,
    os_name: str,
    runner: CommandRunner,
    reader: FileReader,
) -> ProcessorIdentity:
    identity = ProcessorIdentity(
        architecture=detect_architecture(raw_architecture, os_name, runner),
        raw_architecture=raw_architecture,
        model_name=detect_model_name(os_name, runner, reader),
    )
    logger.debug(
        "Processor identified",
        architecture=identity.architecture,
        raw_architecture=identity.raw_architecture,
        model_name=identity.model_name,
    )
    return identity
