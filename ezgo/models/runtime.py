"""Runtime library resolution models."""

from collections import deque
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass
class TraversalState:
    """Mutable state of one dependency traversal.

    Library names compare case-insensitively; `required` maps the folded
    name to the spelling first reported by the dump tool.

    Attributes:
        required: Every library discovered so far, at any depth.
        processed: Folded names that have already been inspected.
        queue: Names awaiting inspection, breadth-first.
    """

    required: dict[str, str] = field(default_factory=dict)
    processed: set[str] = field(default_factory=set)
    queue: deque[str] = field(default_factory=deque)

    def discover(self, name: str) -> bool:
        """Record a library name; enqueue it if it is new.

        Returns:
            True if the name had not been seen before.
        """
        key = name.lower()
        if key in self.required:
            return False
        self.required[key] = name
        self.queue.append(name)
        return True

    def mark_processed(self, name: str) -> bool:
        """Mark a name as inspected.

        Returns:
            False if it was already processed.
        """
        key = name.lower()
        if key in self.processed:
            return False
        self.processed.add(key)
        return True

    @property
    def names(self) -> set[str]:
        """Return the dependency set with original casing."""
        return set(self.required.values())


@dataclass
class CopyReport:
    """Outcome of copying runtime libraries next to a build artifact."""

    destination: Path
    copied: list[Path] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)
    failed: dict[str, str] = field(default_factory=dict)

    @property
    def copied_count(self) -> int:
        """Return the number of libraries copied."""
        return len(self.copied)


@dataclass
class PostBuildResult:
    """Result of the post-build resolve-and-copy step.

    Attributes:
        output_path: Build artifact that was analyzed.
        required: Transitive non-system libraries of the artifact.
        copy: Copy phase report; None when the step was skipped.
        skipped: Whether the step was skipped on request.
    """

    output_path: Path
    required: set[str] = field(default_factory=set)
    copy: CopyReport | None = None
    skipped: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "output_path": str(self.output_path),
            "required": sorted(self.required, key=str.lower),
            "copied": [p.name for p in self.copy.copied] if self.copy else [],
            "missing": list(self.copy.missing) if self.copy else [],
            "failed": dict(self.copy.failed) if self.copy else {},
            "skipped": self.skipped,
        }
