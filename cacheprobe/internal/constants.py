"""
Fixed names and locations queried during detection.
"""

# ---------------------------------------------------------------------
# Environment (logging only; detection never reads the environment)
# ---------------------------------------------------------------------

LOG_LEVEL_ENV_VAR = "CACHEPROBE_LOG_LEVEL"
LOG_FILE_ENV_VAR = "CACHEPROBE_LOG_FILE"

# ---------------------------------------------------------------------
# Host identifiers
# ---------------------------------------------------------------------

OS_LINUX = "linux"
OS_MACOS = "macos"
OS_WINDOWS = "windows"

ARCH_X86 = "x86"
ARCH_APPLE_SILICON = "Apple Silicon"
ARCH_ARM = "ARM"

# ---------------------------------------------------------------------
# macOS (sysctl)
# ---------------------------------------------------------------------

SYSCTL_COMMAND = "sysctl"
SYSCTL_BRAND_STRING = "machdep.cpu.brand_string"
SYSCTL_PERF_LEVEL_COUNT = "hw.nperflevels"
SYSCTL_PERF_LEVEL_L1I = "hw.perflevel{index}.l1icachesize"
SYSCTL_PERF_LEVEL_L1D = "hw.perflevel{index}.l1dcachesize"
SYSCTL_PERF_LEVEL_L2 = "hw.perflevel{index}.l2cachesize"
SYSCTL_L1 = "hw.l1cachesize"
SYSCTL_L1I = "hw.l1icachesize"
SYSCTL_L1D = "hw.l1dcachesize"
SYSCTL_L2 = "hw.l2cachesize"
SYSCTL_L3 = "hw.l3cachesize"

# ---------------------------------------------------------------------
# Linux (procfs / sysfs)
# ---------------------------------------------------------------------

PROC_CPUINFO_PATH = "/proc/cpuinfo"
SYSFS_CACHE_ROOT = "/sys/devices/system/cpu/cpu0/cache"
SYSFS_CACHE_INDEX_COUNT = 10

# ---------------------------------------------------------------------
# Windows (wmic)
# ---------------------------------------------------------------------

WMIC_COMMAND = "wmic"
WMIC_NAME_ARGS = ("cpu", "get", "name", "/value")
WMIC_CACHE_ARGS = ("cpu", "get", "L1CacheSize,L2CacheSize,L3CacheSize", "/value")

# ---------------------------------------------------------------------
# Level names
# ---------------------------------------------------------------------

DEFAULT_LEVEL_NAME = "Default"
PERFORMANCE_LEVEL_NAME = "Performance Cores"
EFFICIENCY_LEVEL_NAME = "Efficiency Cores (Level {index})"
