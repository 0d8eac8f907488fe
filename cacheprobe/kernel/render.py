"""
Turns a ProcessorInfo into the lines of the text report.
"""
from typing import List

from cacheprobe.kernel.model import CacheInfo, PerformanceLevel, ProcessorInfo
from cacheprobe.kernel.units import format_size

CACHE_HEADER = "Cache Information:"


def render_l1(cache: CacheInfo) -> List[str]:
    # Zero-sized L1 parts are omitted rather than shown as "Not detected"
    if cache.unified_size > 0:
        return [f"L1 Cache (Unified): {format_size(cache.unified_size)}"]
    lines = []
    if cache.instruction_size > 0:
        lines.append(f"L1 Instruction Cache: {format_size(cache.instruction_size)}")
    if cache.data_size > 0:
        lines.append(f"L1 Data Cache: {format_size(cache.data_size)}")
    return lines


def render_level(level: PerformanceLevel) -> List[str]:
    lines = ["", level.name, "-" * len(level.name)]
    lines.extend(render_l1(level.l1_cache))
    lines.append(f"L2 Cache: {format_size(level.l2_cache)}")
    if level.l3_cache > 0:
        lines.append(f"L3 Cache: {format_size(level.l3_cache)}")
    return lines


def render(info: ProcessorInfo) -> List[str]:
    lines = [f"Architecture: {info.architecture} - {info.raw_architecture}"]
    if info.model_name:
        lines.append(f"CPU Model: {info.model_name}")
    lines.extend(["", CACHE_HEADER, "=" * len(CACHE_HEADER)])
    for level in info.performance_levels:
        lines.extend(render_level(level))
    return lines


def render_text(info: ProcessorInfo) -> str:
    return "\n".join(render(info))
