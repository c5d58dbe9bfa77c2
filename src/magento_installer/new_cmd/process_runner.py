"""ProcessRunner: run the install pipeline in a shell and relay its output.

When a terminal device is available the child is attached to it so
Composer can prompt interactively; otherwise stdout and stderr are merged
and forwarded line by line to an output sink as they are produced.
"""

import os
import subprocess
from dataclasses import dataclass

TTY_PATH = "/dev/tty"


@dataclass
class ProcessResult:
    """Exit status of the install pipeline."""
    returncode: int

    @property
    def successful(self):
        return self.returncode == 0


def tty_available(tty_path=TTY_PATH):
    """True when *tty_path* can back the child's terminal on this host."""
    if os.name == "nt" or not tty_path:
        return False
    return os.path.exists(tty_path) and os.access(tty_path, os.R_OK)


def _relay_lines(pipe, output):
    """Forward each line of *pipe* to *output* as soon as it is read."""
    for raw in iter(pipe.readline, b""):
        output(raw.decode("utf-8", errors="replace"))


def run_with_relay(command_line, cwd, output):
    """Run *command_line* with merged stdout/stderr relayed to *output*."""
    process = subprocess.Popen(
        command_line,
        shell=True,
        cwd=cwd,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
    )
    with process.stdout:
        _relay_lines(process.stdout, output)
    return ProcessResult(returncode=process.wait())


def run_with_tty(command_line, cwd, tty):
    """Run *command_line* with *tty* as its stdin, stdout and stderr."""
    result = subprocess.run(
        command_line, shell=True, cwd=cwd, stdin=tty, stdout=tty, stderr=tty,
    )
    return ProcessResult(returncode=result.returncode)


class ProcessRunner:
    """Runs a shell command line, attaching a terminal when possible."""

    def __init__(self, tty_path=TTY_PATH):
        self._tty_path = tty_path

    def run(self, command_line, cwd, output, warn):
        """Run *command_line* in *cwd*.

        Args:
            command_line: Shell command line to execute
            cwd: Working directory of the child
            output: Callable(text) receiving relayed output
            warn: Callable(message) receiving non-fatal warnings

        Returns:
            ProcessResult
        """
        if tty_available(self._tty_path):
            try:
                tty = open(self._tty_path, "r+b", buffering=0)
            except OSError as e:
                warn(f"Warning: {e}")
            else:
                with tty:
                    return run_with_tty(command_line, cwd, tty)
        return run_with_relay(command_line, cwd, output)
