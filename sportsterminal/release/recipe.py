"""Release recipe: the package metadata a downstream packager builds from."""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import RecipeError

REQUIRED_FIELDS = ("name", "desc", "homepage", "url", "license")
TAG_PATTERN = re.compile(r"/refs/tags/v?(?P<version>\d+(?:\.\d+)*(?:-[0-9A-Za-z.]+)?)\.(?:tar\.gz|tgz|zip)$")
SHA256_PATTERN = re.compile(r"^[0-9a-f]{64}$")


@dataclass(frozen=True)
class Recipe:
    """Parsed release recipe."""
    name: str
    desc: str
    homepage: str
    url: str
    version: str
    license: str
    sha256: str = ""
    build: Optional[dict[str, Any]] = None
    test: Optional[dict[str, Any]] = None

    @property
    def checksum_pinned(self) -> bool:
        """True once a real SHA-256 has been recorded for the archive."""
        return bool(SHA256_PATTERN.match(self.sha256))


def version_from_url(url: str) -> str:
    """
    Extract the version from a tag archive URL.

    Raises:
        RecipeError: If the URL does not point at a version tag archive
    """
    match = TAG_PATTERN.search(url)
    if not match:
        raise RecipeError(f"Source URL is not a version tag archive: {url}", field="url")
    return match.group("version")


def load_recipe(path: Path) -> Recipe:
    """
    Load and validate a recipe file.

    Raises:
        RecipeError: If the file is unreadable, a required field is missing,
            or the checksum is present but malformed
    """
    path = Path(path)
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise RecipeError(f"Cannot read recipe {path}: {e}") from e

    if not isinstance(data, dict):
        raise RecipeError(f"Recipe {path} must contain a mapping")

    for field_name in REQUIRED_FIELDS:
        if not isinstance(data.get(field_name), str) or not data[field_name].strip():
            raise RecipeError(f"Recipe is missing required field '{field_name}'", field=field_name)

    sha256 = data.get("sha256") or ""
    if not isinstance(sha256, str):
        raise RecipeError("sha256 must be a string", field="sha256")
    sha256 = sha256.strip().lower()
    if sha256 and not SHA256_PATTERN.match(sha256):
        raise RecipeError(f"sha256 is not a hex SHA-256 digest: {sha256!r}", field="sha256")

    return Recipe(
        name=data["name"],
        desc=data["desc"],
        homepage=data["homepage"],
        url=data["url"],
        version=version_from_url(data["url"]),
        license=data["license"],
        sha256=sha256,
        build=data.get("build"),
        test=data.get("test"),
    )


def check_recipe_version(recipe: Recipe, package_version: str) -> None:
    """
    Ensure the recipe's archive tag matches the package being released.

    Raises:
        RecipeError: On version mismatch
    """
    if recipe.version != package_version:
        raise RecipeError(
            f"Recipe archive tag v{recipe.version} does not match package version {package_version}",
            field="url",
            context={"recipe_version": recipe.version, "package_version": package_version}
        )
