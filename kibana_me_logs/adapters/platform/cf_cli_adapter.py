import logging
import shutil
import subprocess
from typing import Optional

from kibana_me_logs.exceptions import PlatformCommandError
from kibana_me_logs.ports.platform.platform_command_port import PlatformCommandPort


class CfCliAdapter(PlatformCommandPort):
    """Runs commands through the locally installed cf CLI."""

    def __init__(
        self,
        command: str = "cf",
        timeout: Optional[float] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._command = command
        self._timeout = timeout
        self._logger = logger or logging.getLogger(__name__)

    def run(self, *args: str) -> list[str]:
        cmd = [self._resolve_executable(), *[str(a) for a in args]]
        self._logger.debug(f"Running platform command: {' '.join(cmd)}")
        try:
            result = subprocess.run(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                timeout=self._timeout,
            )
        except subprocess.TimeoutExpired:
            raise PlatformCommandError(f"'{' '.join(cmd[1:])}' timed out")
        except OSError as e:
            raise PlatformCommandError(f"Unable to run '{self._command}': {e}")

        if result.returncode != 0:
            message = self._failure_message(result.stdout, result.stderr)
            self._logger.error(
                f"Platform command failed (exit {result.returncode}): {message}"
            )
            raise PlatformCommandError(message)
        return result.stdout.splitlines()

    def _resolve_executable(self) -> str:
        exe = shutil.which(self._command)
        if not exe:
            raise PlatformCommandError(
                f"'{self._command}' executable not found on PATH"
            )
        return exe

    @staticmethod
    def _failure_message(stdout: str, stderr: str) -> str:
        # cf reports most failures on stdout after a FAILED marker
        for stream in (stderr, stdout):
            lines = [line.strip() for line in (stream or "").splitlines() if line.strip()]
            lines = [line for line in lines if line != "FAILED"]
            if lines:
                return lines[-1]
        return "cf command failed"
