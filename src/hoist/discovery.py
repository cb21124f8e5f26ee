"""Feature Discovery Registry

Finds flag classes in the configured feature directories and answers
queries about them.

Architecture:
    FeatureDiscovery -> scan_directory (per configured root) -> handles
                     -> Container.make -> resolve_feature -> FeatureData

Discovery runs once per registry instance. The combined handle tuple is
cached for the lifetime of the instance, so the registry is meant to be
created once per process and shared.

Usage:
    discovery = FeatureDiscovery(
        {"app/features": "app.features"},
        router=StaticRouter({"checkout.show": "/checkout"}),
        evaluator=flag_engine,
    )

    discovery.names()                       # ["new-checkout", ...]
    discovery.tagged("beta")                # features tagged "beta"
    discovery.with_tags(["billing", "beta"])  # tagged with both
    discovery.with_any_tags(["pro", "enterprise"])
    discovery.for_model(user)               # descriptors with active state
"""

import logging
import threading
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from hoist.collaborators import ClassContainer, Container, Evaluator, Router
from hoist.config import (
    DEFAULT_FEATURE_DIRECTORIES,
    ConfigurationError,
    get_feature_directories,
)
from hoist.data import FeatureData
from hoist.resolver import feature_name, resolve_feature
from hoist.scanner import scan_directory

logger = logging.getLogger(__name__)


class FeatureDiscovery:
    """
    Discovers flag classes and builds FeatureData descriptors for them.

    Attributes:
        directories: Ordered mapping of feature directory -> module namespace
        container: Builds flag instances from handles
        router: Resolves feature routes into hrefs (optional)
        evaluator: Resolves active state for a scope (optional, required by
            the *_for / for_model queries)
    """

    def __init__(
        self,
        directories: Optional[Mapping[str | Path, str]] = None,
        *,
        container: Optional[Container] = None,
        router: Optional[Router] = None,
        evaluator: Optional[Evaluator] = None,
    ):
        if directories is None:
            directories = DEFAULT_FEATURE_DIRECTORIES
        self.directories: Dict[str, str] = {
            str(directory): namespace for directory, namespace in directories.items()
        }
        self.container = container or ClassContainer()
        self.router = router
        self.evaluator = evaluator

        self._discovered: Optional[tuple[str, ...]] = None
        self._lock = threading.Lock()

    def discover(self) -> tuple[str, ...]:
        """
        Discover all flag classes from the configured directories.

        The first call scans every directory in configured order; later
        calls return the same tuple object without rescanning. A handle
        found under more than one root is listed once.

        Returns:
            Feature handles ("module:ClassName")
        """
        if self._discovered is not None:
            return self._discovered

        with self._lock:
            if self._discovered is None:
                handles: Dict[str, None] = {}
                for directory, namespace in self.directories.items():
                    for handle in scan_directory(directory, namespace):
                        handles.setdefault(handle)
                self._discovered = tuple(handles)
                logger.info(
                    f"Discovered {len(self._discovered)} feature classes "
                    f"in {len(self.directories)} directories"
                )

        return self._discovered

    def all(self) -> List[FeatureData]:
        """Get all features as FeatureData, without active state."""
        return [
            resolve_feature(self.container.make(handle), router=self.router)
            for handle in self.discover()
        ]

    def for_model(self, scope: Any) -> List[FeatureData]:
        """
        Get all features with their active state for a scope (user, team...).

        Raises:
            ConfigurationError: If no evaluator is configured
        """
        evaluator = self._require_evaluator()
        features = []
        for handle in self.discover():
            feature = self.container.make(handle)
            active = evaluator.is_active(feature_name(feature), scope)
            features.append(resolve_feature(feature, active=active, router=self.router))
        return features

    def names(self) -> List[str]:
        """Get the names of all features."""
        return [feature_name(self.container.make(handle)) for handle in self.discover()]

    def tagged(self, tag: str) -> List[FeatureData]:
        """Get features with a specific tag."""
        return _filter(self.all(), _has_tag(tag))

    def with_tags(self, tags: Iterable[str]) -> List[FeatureData]:
        """Get features with ALL specified tags (AND logic). No tags matches everything."""
        return _filter(self.all(), _has_all_tags(tags))

    def with_any_tags(self, tags: Iterable[str]) -> List[FeatureData]:
        """Get features with ANY of the specified tags (OR logic). No tags matches nothing."""
        return _filter(self.all(), _has_any_tag(tags))

    def tagged_for(self, tag: str, scope: Any) -> List[FeatureData]:
        """Get features with a specific tag, with active state for a scope."""
        return _filter(self.for_model(scope), _has_tag(tag))

    def with_tags_for(self, tags: Iterable[str], scope: Any) -> List[FeatureData]:
        """Get features with ALL specified tags, with active state for a scope."""
        return _filter(self.for_model(scope), _has_all_tags(tags))

    def with_any_tags_for(self, tags: Iterable[str], scope: Any) -> List[FeatureData]:
        """Get features with ANY of the specified tags, with active state for a scope."""
        return _filter(self.for_model(scope), _has_any_tag(tags))

    def _require_evaluator(self) -> Evaluator:
        if self.evaluator is None:
            raise ConfigurationError(
                "No feature evaluator configured; pass evaluator= to resolve active state"
            )
        return self.evaluator


Predicate = Callable[[FeatureData], bool]


def _filter(features: List[FeatureData], predicate: Predicate) -> List[FeatureData]:
    return [feature for feature in features if predicate(feature)]


def _has_tag(tag: str) -> Predicate:
    return lambda feature: feature.has_tag(tag)


def _has_all_tags(tags: Iterable[str]) -> Predicate:
    wanted = list(tags)
    return lambda feature: all(feature.has_tag(tag) for tag in wanted)


def _has_any_tag(tags: Iterable[str]) -> Predicate:
    wanted = list(tags)
    return lambda feature: any(feature.has_tag(tag) for tag in wanted)


def create_discovery(
    config: Optional[Dict[str, Any]] = None,
    *,
    container: Optional[Container] = None,
    router: Optional[Router] = None,
    evaluator: Optional[Evaluator] = None,
) -> FeatureDiscovery:
    """
    Factory function to create a registry from loaded configuration.

    Args:
        config: Configuration dictionary from load_config(); defaults are
            used when None
        container: Instantiation service (default: ClassContainer)
        router: Route lookup for hrefs
        evaluator: Flag evaluation engine for active state

    Returns:
        FeatureDiscovery for the configured directories

    Raises:
        ConfigurationError: If feature_directories is malformed
    """
    directories = None
    if config is not None:
        directories = get_feature_directories(config)
    return FeatureDiscovery(
        directories,
        container=container,
        router=router,
        evaluator=evaluator,
    )
