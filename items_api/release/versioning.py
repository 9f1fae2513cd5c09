"""
Items API — Semantic Version Bumping
=====================================

What:  Turns a commit message into a major/minor/patch bump of the version
       stored in a JSON manifest file.
How:   Three steps, no state kept between runs:
       1. read_commit_message(): explicit message, else `git log -1`
       2. classify_commit():     message → BumpLevel
       3. bump_manifest():       rewrite the manifest's "version" field

Classification precedence:
    "BREAKING CHANGE" / "BREAKING-CHANGE" anywhere (case-sensitive) → major
    message starts with "feat" (any case)                          → minor
    message starts with "fix" (any case)                           → patch
    anything else                                                  → patch
"""

import enum
import json
import logging
import re
import subprocess
from pathlib import Path
from typing import List, Optional, Union

logger = logging.getLogger(__name__)

DEFAULT_VERSION = "0.0.0"

_BREAKING_RE = re.compile(r"BREAKING[ -]CHANGE")
_FEAT_RE = re.compile(r"feat(?:\([^)]*\))?:?", re.IGNORECASE)
_FIX_RE = re.compile(r"fix(?:\([^)]*\))?:?", re.IGNORECASE)
_LEADING_DIGITS_RE = re.compile(r"\s*(\d+)")


class BumpLevel(str, enum.Enum):
    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"


def read_commit_message(
    provided: Optional[str] = None,
    repo_dir: Union[str, Path, None] = None,
) -> str:
    """
    Return `provided` when non-empty, otherwise the latest commit message.

    Any failure to run git (not installed, not a repository, no commits)
    yields an empty string.
    """
    if provided:
        return provided
    try:
        result = subprocess.run(
            ["git", "log", "-1", "--pretty=%B"],
            cwd=repo_dir,
            capture_output=True,
            text=True,
            check=True,
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("Could not read last commit message: %s", e)
        return ""
    return result.stdout.strip()


def classify_commit(message: str) -> BumpLevel:
    if _BREAKING_RE.search(message):
        return BumpLevel.MAJOR
    if _FEAT_RE.match(message):
        return BumpLevel.MINOR
    if _FIX_RE.match(message):
        return BumpLevel.PATCH
    return BumpLevel.PATCH


def parse_version(version: str) -> List[int]:
    """
    Split "MAJOR.MINOR.PATCH" into three integers.

    Missing trailing components are zero ("1.2" → [1, 2, 0]); each component
    keeps only its leading digits ("3-beta" → 3); components past the third
    are dropped. Raises ValueError for a component with no leading digits.
    """
    parts = []
    for raw in version.split(".")[:3]:
        match = _LEADING_DIGITS_RE.match(raw)
        if match is None:
            raise ValueError(f"Invalid version component {raw!r} in {version!r}")
        parts.append(int(match.group(1)))
    while len(parts) < 3:
        parts.append(0)
    return parts


def bump_version(current: str, level: Union[BumpLevel, str]) -> str:
    """
    >>> bump_version("1.2.3", "minor")
    '1.3.0'
    """
    major, minor, patch = parse_version(current)
    level = BumpLevel(level)
    if level is BumpLevel.MAJOR:
        major, minor, patch = major + 1, 0, 0
    elif level is BumpLevel.MINOR:
        minor, patch = minor + 1, 0
    else:
        patch += 1
    return f"{major}.{minor}.{patch}"


def bump_manifest(manifest_path: Union[str, Path], level: Union[BumpLevel, str]) -> str:
    """
    Bump the "version" field of a JSON manifest in place; returns the new version.

    A missing or empty "version" counts as 0.0.0. The file is rewritten with
    two-space indentation, original key order and a trailing newline.
    Read and parse errors propagate to the caller.
    """
    path = Path(manifest_path)
    manifest = json.loads(path.read_text(encoding="utf-8"))
    current = manifest.get("version") or DEFAULT_VERSION
    new_version = bump_version(current, level)
    manifest["version"] = new_version
    path.write_text(json.dumps(manifest, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    logger.info("Bumped %s from %s to %s (%s)", path, current, new_version, BumpLevel(level).value)
    return new_version
