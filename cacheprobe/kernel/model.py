"""
The normalized processor model every platform probe populates.

Sizes are byte counts. Zero is the "not detected" sentinel, never a
measured size.
"""
from dataclasses import dataclass, field
from typing import Iterable, List, Optional


@dataclass
class CacheInfo:
    """L1 cache sizes for one performance level."""
    instruction_size: int = 0
    data_size: int = 0
    unified_size: int = 0


@dataclass
class PerformanceLevel:
    """
    One tier of cores (e.g. performance or efficiency cores) and its caches.
    L3 is shared on most parts and is usually only recorded on the first level.
    """
    name: str
    l1_cache: CacheInfo = field(default_factory=CacheInfo)
    l2_cache: int = 0
    l3_cache: int = 0


@dataclass(frozen=True)
class ProcessorIdentity:
    """Architecture label, raw architecture string and best-effort model name."""
    architecture: str
    raw_architecture: str
    model_name: str = ""


@dataclass
class ProcessorInfo:
    """
    Everything the report shows. Performance levels keep discovery order,
    which is tier order, and their names are unique.
    """
    architecture: str
    raw_architecture: str
    model_name: str = ""
    performance_levels: List[PerformanceLevel] = field(default_factory=list)
    diagnostics: List[str] = field(default_factory=list)

    def __post_init__(self):
        names = [level.name for level in self.performance_levels]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate performance level names: {', '.join(duplicates)}")

    @classmethod
    def from_identity(
        cls,
        identity: ProcessorIdentity,
        levels: Iterable[PerformanceLevel] = (),
        diagnostics: Iterable[str] = (),
    ) -> "ProcessorInfo":
        return cls(
            architecture=identity.architecture,
            raw_architecture=identity.raw_architecture,
            model_name=identity.model_name,
            performance_levels=list(levels),
            diagnostics=list(diagnostics),
        )

    def level(self, name: str) -> Optional[PerformanceLevel]:
        return next((level for level in self.performance_levels if level.name == name), None)

    @property
    def level_names(self) -> List[str]:
        return [level.name for level in self.performance_levels]
