"""Archive checksum verification. Verification fails closed."""

import hashlib
import hmac
from pathlib import Path

from ..errors import ChecksumError
from ..logging.config import get_logger
from .recipe import Recipe

logger = get_logger(__name__)

CHUNK_SIZE = 1 << 16


def compute_sha256(path: Path) -> str:
    """Hex SHA-256 of a file, read in chunks."""
    digest = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()


def verify_archive(path: Path, recipe: Recipe) -> str:
    """
    Verify a downloaded source archive against the recipe.

    An unset checksum is a failure, not a skip.

    Args:
        path: Downloaded archive
        recipe: Recipe declaring the expected SHA-256

    Returns:
        The verified digest

    Raises:
        ChecksumError: If the recipe has no checksum or the digest differs
    """
    if not recipe.checksum_pinned:
        logger.error("Refusing unverified archive", archive=str(path), version=recipe.version)
        raise ChecksumError(
            f"No SHA-256 recorded for {recipe.name} v{recipe.version}; refusing to install",
            expected=recipe.sha256 or None
        )

    actual = compute_sha256(Path(path))
    if not hmac.compare_digest(actual, recipe.sha256):
        logger.error("Archive checksum mismatch", archive=str(path),
                     expected=recipe.sha256, actual=actual)
        raise ChecksumError(
            f"SHA-256 mismatch for {path}: expected {recipe.sha256}, got {actual}",
            expected=recipe.sha256,
            actual=actual
        )

    logger.info("Archive checksum verified", archive=str(path), sha256=actual)
    return actual
