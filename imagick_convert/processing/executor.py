"""
Command executor - runs convert against the destination file.

The destination is first created as a byte copy of the source, then convert
is run synchronously so it can overwrite it with the transformed image.
The exit status is recorded in an ExecutionResult; it is only raised on
request so that chained callers keep the fire-and-forget behaviour.
"""

import os
import shutil
import subprocess
from typing import List

from ..core.errors import ExternalToolFailure
from ..core.types import ExecutionResult
from ..logger import get_logger
from .options import command_string

logger = get_logger("executor")


class CommandExecutor:
    """Executes convert commands as subprocesses."""

    def __init__(self, program: str = "convert", dry_run: bool = False):
        self.program = program
        # dry_run: log commands and report success without starting anything
        self.dry_run = dry_run

    def command_args(self, args: List[str]) -> List[str]:
        """Prefix argument tokens with the program."""
        return [self.program, *args]

    def run(self, args: List[str], check: bool = False) -> ExecutionResult:
        """
        Run the program with the given arguments and wait for it.

        Args:
            args: Argument tokens (without the program itself)
            check: Raise ExternalToolFailure if the run did not succeed

        Returns:
            ExecutionResult with exit status and captured output
        """
        argv = self.command_args(args)
        if self.dry_run:
            logger.info("Dry run, not running %s", command_string(argv))
            return ExecutionResult(args=argv, returncode=0)

        logger.debug("Running %s", command_string(argv))

        try:
            proc = subprocess.run(argv, capture_output=True, text=True, errors="replace")
        except OSError as e:
            result = ExecutionResult(args=argv, returncode=None, error=str(e))
        else:
            result = ExecutionResult(
                args=argv,
                returncode=proc.returncode,
                stdout=proc.stdout or "",
                stderr=proc.stderr or "",
            )

        if not result.ok:
            logger.warning("%s failed (%s) %s", self.program, result, result.stderr.strip())
            if check:
                raise ExternalToolFailure(result)

        return result

    def save(
        self,
        source: str,
        args: List[str],
        destination: str,
        check: bool = False,
    ) -> ExecutionResult:
        """Copy source to destination, then run args with the destination appended."""
        if os.path.exists(destination) and os.path.samefile(source, destination):
            logger.debug("Saving %s in place", destination)
        else:
            shutil.copyfile(source, destination)
        return self.run([*args, destination], check=check)
