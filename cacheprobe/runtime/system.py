# Host identifiers used to pick a detection strategy
import platform

from cacheprobe.internal.constants import OS_LINUX, OS_MACOS, OS_WINDOWS

_OS_NAMES = {
    "linux": OS_LINUX,
    "darwin": OS_MACOS,
    "windows": OS_WINDOWS,
}

_ARCH_ALIASES = {
    "amd64": "x86_64",
    "x64": "x86_64",
    "x86_64": "x86_64",
    "i386": "x86",
    "i486": "x86",
    "i586": "x86",
    "i686": "x86",
    "x86": "x86",
    "arm64": "aarch64",
    "aarch64": "aarch64",
}

def normalize_os(system_name: str) -> str:
    """Map platform.system() output to 'linux', 'macos' or 'windows'; pass others through lower-cased."""
    name = (system_name or "").strip().lower()
    return _OS_NAMES.get(name, name or "unknown")

def normalize_arch(machine: str) -> str:
    """Map platform.machine() output to the identifiers detection understands."""
    machine = (machine or "").strip().lower()
    if not machine:
        return "unknown"
    if machine in _ARCH_ALIASES:
        return _ARCH_ALIASES[machine]
    if machine.startswith("arm"):
        return "arm"
    return machine

def get_os_info() -> str:
    return normalize_os(platform.system())

def get_cpu_arch() -> str:
    return normalize_arch(platform.machine())

