"""
A concrete CommandRunner that spawns the command as a child process.
"""
import subprocess
from typing import Sequence

from cacheprobe.internal.logging import get_logger
from cacheprobe.kernel.contracts import CommandRunner, QueryResult

logger = get_logger(__name__)


class SubprocessCommandRunner(CommandRunner):
    """
    Runs a command once, waits for it, and returns its stdout decoded as UTF-8
    (undecodable bytes are replaced). Failures come back as failed results.
    """

    def run(self, command: str, args: Sequence[str]) -> QueryResult:
        argv = [command, *args]
        try:
            completed = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as e:
            logger.debug("Command could not be started", argv=argv, error=str(e))
            return QueryResult.failure(f"{command}: {e}")

        if completed.returncode != 0:
            logger.debug(
                "Command exited with non-zero status",
                argv=argv,
                returncode=completed.returncode,
                stderr=(completed.stderr or "").strip(),
            )
            return QueryResult.failure(f"{command} exited with status {completed.returncode}")

        return QueryResult.success(completed.stdout or "")
