"""
A concrete FileReader backed by the local filesystem (procfs and sysfs on Linux).
"""
from pathlib import Path

from cacheprobe.internal.logging import get_logger
from cacheprobe.kernel.contracts import FileReader, QueryResult

logger = get_logger(__name__)


class FileSystemReader(FileReader):
    def read(self, path: str) -> QueryResult:
        try:
            return QueryResult.success(Path(path).read_text(encoding="utf-8", errors="replace"))
        except OSError as e:
            logger.debug("File could not be read", path=str(path), error=str(e))
            return QueryResult.failure(f"{path}: {e}")
