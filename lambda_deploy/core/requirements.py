"""Dependency manifest merging"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Set

from packaging.requirements import Requirement, InvalidRequirement
from packaging.utils import canonicalize_name

from ..api.exceptions import PackageError

logger = logging.getLogger(__name__)

# Options whose argument is a path relative to the manifest
_PATH_OPTIONS = ("-r", "--requirement", "-c", "--constraint")


@dataclass
class RequirementLine:
    """One meaningful line of a requirements file"""
    text: str
    name: Optional[str] = None
    origin: Optional[Path] = None


@dataclass
class MergedRequirements:
    """Result of merging unit and shared manifests"""
    lines: List[RequirementLine] = field(default_factory=list)
    overridden: List[str] = field(default_factory=list)

    @property
    def names(self) -> Set[str]:
        return {line.name for line in self.lines if line.name}

    def is_empty(self) -> bool:
        return not self.lines

    def render(self) -> str:
        return "".join(f"{line.text}\n" for line in self.lines)

    def write(self, path: Path) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.render(), encoding="utf-8")
        return path


def _strip_comment(line: str) -> str:
    if line.lstrip().startswith("#"):
        return ""
    # pip only treats " #" as an inline comment
    index = line.find(" #")
    if index >= 0:
        line = line[:index]
    return line.strip()


def _absolutize_option(text: str, base_dir: Path) -> str:
    for option in _PATH_OPTIONS:
        if text.startswith(option + " ") or text.startswith(option + "="):
            target = text[len(option) + 1:].strip()
            if not Path(target).is_absolute():
                target = str((base_dir / target).resolve())
            return f"{option} {target}"
    return text


def parse_requirements_file(path: Path) -> List[RequirementLine]:
    """Parse a requirements file into lines

    Plain requirement specifiers carry their canonical project name.
    Anything else (pip options, URLs, local paths) is kept verbatim with
    nested file references made absolute.
    """
    lines = []
    base_dir = path.parent.resolve()

    try:
        content = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise PackageError(f"{path} is not valid UTF-8: {e}")

    for raw in content.splitlines():
        text = _strip_comment(raw)
        if not text:
            continue

        if text.startswith("-"):
            lines.append(RequirementLine(_absolutize_option(text, base_dir), origin=path))
            continue

        try:
            requirement = Requirement(text)
        except InvalidRequirement:
            logger.debug(f"Keeping unparsed requirement line verbatim: {text}")
            lines.append(RequirementLine(text, origin=path))
            continue

        lines.append(RequirementLine(text, canonicalize_name(requirement.name), origin=path))

    return lines


def merge_requirements(unit_manifest: Optional[Path],
                       shared_manifest: Optional[Path]) -> MergedRequirements:
    """Merge unit-specific and shared manifests

    When both manifests name the same project, the unit-specific entry
    wins and the shared one is dropped.

    Args:
        unit_manifest: The unit's own requirements file, if any
        shared_manifest: The repository-wide requirements file, if any

    Returns:
        MergedRequirements with unit lines first
    """
    merged = MergedRequirements()

    if unit_manifest:
        merged.lines.extend(parse_requirements_file(unit_manifest))

    if shared_manifest:
        unit_names = merged.names
        seen_text = {line.text for line in merged.lines}
        for line in parse_requirements_file(shared_manifest):
            if line.name and line.name in unit_names:
                merged.overridden.append(line.name)
                logger.info(f"Unit requirement overrides shared requirement: {line.text}")
                continue
            if line.name is None and line.text in seen_text:
                continue
            merged.lines.append(line)

    return merged
