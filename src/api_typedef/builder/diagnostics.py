"""Collects problems found while building a type definition tree."""

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildIssue:
    """One property that was left out of the tree."""

    path: str  # dotted path of the property, e.g. "Pet.owner.address"
    message: str


@dataclass
class BuildDiagnostics:
    """Sink for skipped properties. Each issue is also logged as a warning."""

    issues: list[BuildIssue] = field(default_factory=list)

    def skip(self, path: str, message: str) -> None:
        logger.warning("Unable to process object property %s. Error: %s", path, message)
        self.issues.append(BuildIssue(path=path, message=message))
