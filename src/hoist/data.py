"""Feature descriptor returned by discovery queries."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class FeatureData:
    """Display-ready metadata for one feature flag.

    Attributes:
        name: Feature identifier (not required to be unique)
        label: Human-readable label
        description: Optional description
        href: URL of the feature's route, if the route is registered
        active: Active state for a scope, None when not resolved for one
        metadata: Free-form metadata returned by the flag's metadata()
        tags: Tags used for filtering
        feature_set: Logical grouping identifier
    """

    name: str
    label: str
    description: str | None = None
    href: str | None = None
    active: bool | None = None
    metadata: dict[str, Any] = field(default_factory=dict, hash=False)
    tags: tuple[str, ...] = ()
    feature_set: str | None = None

    def has_tag(self, tag: str) -> bool:
        """Exact, case-sensitive tag membership."""
        return tag in self.tags

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "label": self.label,
            "description": self.description,
            "href": self.href,
            "active": self.active,
            "metadata": dict(self.metadata),
            "tags": list(self.tags),
            "feature_set": self.feature_set,
        }
