"""Hoist - feature flag discovery and metadata for your application.

Scans configured feature directories for flag classes and exposes their
display metadata (label, description, tags, feature set, href) together with
tag filtering and per-scope active state.

Usage:
    from hoist import FeatureDiscovery

    discovery = FeatureDiscovery({"app/features": "app.features"})
    for feature in discovery.tagged("beta"):
        print(feature.name, feature.label)
"""

from .attributes import (
    FeatureAttributes,
    FeatureSet,
    description,
    feature_set,
    get_attributes,
    label,
    register_attributes,
    route,
    tags,
)
from .collaborators import ClassContainer, Container, Evaluator, Router, StaticRouter
from .config import ConfigurationError, load_config
from .contracts import Feature
from .data import FeatureData
from .discovery import FeatureDiscovery, create_discovery
from .resolver import feature_name, resolve_feature
from .scanner import handle_for_path, scan_directory

__all__ = [
    "ClassContainer",
    "ConfigurationError",
    "Container",
    "Evaluator",
    "Feature",
    "FeatureAttributes",
    "FeatureData",
    "FeatureDiscovery",
    "FeatureSet",
    "Router",
    "StaticRouter",
    "create_discovery",
    "description",
    "feature_name",
    "feature_set",
    "get_attributes",
    "handle_for_path",
    "label",
    "load_config",
    "register_attributes",
    "resolve_feature",
    "route",
    "scan_directory",
    "tags",
]

__version__ = "0.1.0"
