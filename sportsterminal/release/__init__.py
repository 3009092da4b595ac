"""
Release recipe handling: metadata, archive checksum verification and the
post-install smoke test.
"""
from .checksum import compute_sha256, verify_archive
from .recipe import Recipe, check_recipe_version, load_recipe
from .smoke import SmokeTestResult, run_smoke_test

__all__ = [
    "Recipe",
    "SmokeTestResult",
    "check_recipe_version",
    "compute_sha256",
    "load_recipe",
    "run_smoke_test",
    "verify_archive",
]
