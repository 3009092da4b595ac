"""Post-install smoke test for the installed command."""

import subprocess
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from ..errors import SmokeTestError
from ..logging.config import get_logger

logger = get_logger(__name__)

EXPECTED_OUTPUT = "Error running program"
EXPECTED_EXIT_CODE = 1


@dataclass(frozen=True)
class SmokeTestResult:
    """Outcome of a passing smoke test."""
    command: tuple[str, ...]
    exit_code: int
    output: str


def run_smoke_test(
    executable: Union[str, Sequence[str]],
    expected: str = EXPECTED_OUTPUT,
    expected_code: int = EXPECTED_EXIT_CODE,
    timeout: Optional[float] = 30.0
) -> SmokeTestResult:
    """
    Run the installed command with no arguments and check how it fails.

    Without a terminal the program must exit with ``expected_code`` and print
    ``expected`` to stdout or stderr. stdin is detached and stderr is merged
    into stdout. There is no retry.

    Args:
        executable: Path of the installed command, or an argv prefix
            (``[sys.executable, "-m", "sportsterminal"]``)
        expected: Substring required in the combined output
        expected_code: Required exit status
        timeout: Seconds before the run is abandoned

    Returns:
        The passing result

    Raises:
        SmokeTestError: If the command cannot be run, exits with another
            status, or does not print the expected text
    """
    command = (executable,) if isinstance(executable, str) else tuple(executable)

    try:
        completed = subprocess.run(
            command,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            timeout=timeout,
            check=False,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        raise SmokeTestError(f"Could not run {' '.join(command)}: {e}") from e

    output = completed.stdout.decode("utf-8", errors="replace")

    if completed.returncode != expected_code:
        raise SmokeTestError(
            f"Expected exit status {expected_code}, got {completed.returncode}",
            exit_code=completed.returncode,
            output=output
        )

    if expected not in output:
        raise SmokeTestError(
            f"Output does not contain {expected!r}",
            exit_code=completed.returncode,
            output=output
        )

    logger.info("Smoke test passed", command=" ".join(command), exit_code=completed.returncode)
    return SmokeTestResult(command=command, exit_code=completed.returncode, output=output)
