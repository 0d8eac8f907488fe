from cacheprobe.kernel.contracts.contracts import CommandRunner, FileReader, QueryResult

__all__ = ["CommandRunner", "FileReader", "QueryResult"]
