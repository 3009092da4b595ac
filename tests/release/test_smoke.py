"""Tests for the post-install smoke test."""

import sys

import pytest

from sportsterminal.errors import SmokeTestError
from sportsterminal.release import run_smoke_test
from sportsterminal.release.smoke import EXPECTED_EXIT_CODE, EXPECTED_OUTPUT


def python(code: str) -> list:
    return [sys.executable, "-c", code]


class TestSmokeTest:
    """Running a command without a terminal."""

    def test_installed_module_fails_as_expected(self, monkeypatch, tmp_path):
        """The real program must refuse to start without a TTY."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
        monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path / "cache"))

        result = run_smoke_test([sys.executable, "-m", "sportsterminal"])

        assert result.exit_code == EXPECTED_EXIT_CODE
        assert EXPECTED_OUTPUT in result.output

    def test_expected_failure_passes(self):
        result = run_smoke_test(python("import sys; print('Error running program: no tty'); sys.exit(1)"))

        assert result.exit_code == 1

    def test_output_on_stderr_counts(self):
        run_smoke_test(python("import sys; sys.stderr.write('Error running program\\n'); sys.exit(1)"))

    def test_success_is_a_failure(self):
        """Exiting 0 without a terminal means the TTY check is broken."""
        with pytest.raises(SmokeTestError) as exc_info:
            run_smoke_test(python("print('Error running program')"))

        assert exc_info.value.exit_code == 0

    def test_wrong_output(self):
        with pytest.raises(SmokeTestError) as exc_info:
            run_smoke_test(python("import sys; print('Traceback'); sys.exit(1)"))

        assert exc_info.value.exit_code == 1
        assert "Traceback" in exc_info.value.output

    def test_missing_executable(self, tmp_path):
        with pytest.raises(SmokeTestError, match="Could not run"):
            run_smoke_test(str(tmp_path / "no-such-command"))

    def test_timeout(self):
        with pytest.raises(SmokeTestError):
            run_smoke_test(python("import time; time.sleep(10)"), timeout=0.5)
