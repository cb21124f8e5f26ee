"""Metadata Source Resolver

Turns a flag instance into a FeatureData record by merging three sources,
field by field, first non-None value wins:

    1. Declarative attributes registered with the decorators in
       hoist.attributes (label, description, tags, feature_set, route)
    2. Instance attributes (name, label, description, tags, feature_set,
       route) and the optional metadata() method
    3. Fallbacks: the class name for name and label, None or empty otherwise

Each field is resolved on its own; declaring one attribute never changes
how another field falls back. Declared tags replace instance tags entirely.
"""

from typing import Any, Optional

from hoist.attributes import FeatureAttributes, get_attributes
from hoist.collaborators import Router
from hoist.contracts import (
    HasDescription,
    HasFeatureSet,
    HasLabel,
    HasMetadata,
    HasName,
    HasRoute,
    HasTags,
)
from hoist.data import FeatureData

_NO_ATTRIBUTES = FeatureAttributes()


def class_basename(obj: Any) -> str:
    """Short class name of a class or of an instance's class."""
    cls = obj if isinstance(obj, type) else type(obj)
    return cls.__name__


def feature_name(feature: Any) -> str:
    """Resolve a feature's name: its ``name`` attribute, else the class name."""
    if isinstance(feature, HasName) and feature.name is not None:
        return feature.name
    return class_basename(feature)


def resolve_href(route_name: Optional[str], router: Optional[Router]) -> Optional[str]:
    """Build a URL for a route name, or None if there is nothing to link to."""
    if not route_name or router is None:
        return None
    if not router.route_exists(route_name):
        return None
    return router.resolve_url(route_name)


def resolve_feature(
    feature: Any,
    active: Optional[bool] = None,
    router: Optional[Router] = None,
) -> FeatureData:
    """
    Build the descriptor for a feature instance.

    Args:
        feature: Instantiated flag object
        active: Active state resolved by the caller, passed through as-is
        router: Router used to turn the feature's route into an href

    Returns:
        FeatureData for the feature
    """
    attributes = get_attributes(type(feature)) or _NO_ATTRIBUTES
    basename = class_basename(feature)

    label = _first(
        attributes.label,
        feature.label if isinstance(feature, HasLabel) else None,
        basename,
    )
    description = _first(
        attributes.description,
        feature.description if isinstance(feature, HasDescription) else None,
    )
    route_name = _first(
        attributes.route,
        feature.route if isinstance(feature, HasRoute) else None,
    )

    if attributes.tags is not None:
        tags = attributes.tags
    elif isinstance(feature, HasTags) and isinstance(feature.tags, str):
        tags = (feature.tags,)
    elif isinstance(feature, HasTags) and feature.tags is not None:
        tags = tuple(feature.tags)
    else:
        tags = ()

    feature_set = _first(
        attributes.feature_set.name if attributes.feature_set else None,
        feature.feature_set if isinstance(feature, HasFeatureSet) else None,
    )

    return FeatureData(
        name=feature_name(feature),
        label=label,
        description=description,
        href=resolve_href(route_name, router),
        active=active,
        metadata=_metadata(feature),
        tags=tags,
        feature_set=feature_set,
    )


def _first(*values: Any) -> Any:
    for value in values:
        if value is not None:
            return value
    return None


def _metadata(feature: Any) -> dict[str, Any]:
    if isinstance(feature, HasMetadata) and callable(feature.metadata):
        return dict(feature.metadata() or {})
    return {}
