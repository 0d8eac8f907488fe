from typing import Optional, Protocol, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class QueryResult:
    """
    The outcome of a single best-effort query against the host.
    Callers treat any failed result as "no data"; it is never raised.
    """
    ok: bool
    text: str = ""
    error: Optional[str] = None

    @classmethod
    def success(cls, text: str) -> "QueryResult":
        return cls(ok=True, text=text)

    @classmethod
    def failure(cls, error: str) -> "QueryResult":
        return cls(ok=False, text="", error=error)


class CommandRunner(Protocol):
    """
    Defines the contract for running an OS command and capturing its output.
    Probes interact with the host ONLY through this interface and FileReader.
    """

    def run(self, command: str, args: Sequence[str]) -> QueryResult:
        """
        Run `command` with `args` and return its decoded standard output.
        A missing executable or a non-zero exit status is a failed result.
        """
        ...


class FileReader(Protocol):
    """
    Defines the contract for reading a text file from the host.
    """

    def read(self, path: str) -> QueryResult:
        """
        Return the file's contents as text, or a failed result if it cannot be read.
        """
        ...
