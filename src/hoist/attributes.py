"""Declarative Feature Attributes

Class decorators that attach display metadata to a flag class. Values are
stored in a module-level table keyed by class, and the resolver consults
that table before falling back to instance attributes.

Usage:
    @label("New Checkout")
    @description("Single page checkout flow")
    @tags("billing", "beta")
    @feature_set("billing")
    @route("checkout.show")
    class NewCheckout(Feature):
        ...

Classes that cannot be decorated (generated or third-party classes) can be
registered explicitly:

    register_attributes(ThirdPartyFlag, label="Third Party", tags=["vendor"])

Attributes belong to the decorated class only. A subclass of a decorated
class starts with no attributes of its own.
"""

import dataclasses
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, TypeVar

T = TypeVar("T", bound=type)


@dataclass(frozen=True)
class FeatureSet:
    """Logical grouping a feature belongs to."""

    name: str
    label: Optional[str] = None


@dataclass(frozen=True)
class FeatureAttributes:
    """Declarative metadata registered for one flag class.

    ``None`` means the attribute was not declared. ``tags`` is a tuple once
    declared, even when empty, so an empty ``@tags()`` still overrides the
    instance's tags.
    """

    label: Optional[str] = None
    description: Optional[str] = None
    route: Optional[str] = None
    tags: Optional[tuple[str, ...]] = None
    feature_set: Optional[FeatureSet] = None


_ATTRIBUTE_REGISTRY: dict[type, FeatureAttributes] = {}


def get_attributes(cls: type) -> Optional[FeatureAttributes]:
    """Return the attributes declared on exactly this class, or None."""
    return _ATTRIBUTE_REGISTRY.get(cls)


def register_attributes(
    cls: T,
    *,
    label: Optional[str] = None,
    description: Optional[str] = None,
    route: Optional[str] = None,
    tags: Optional[Iterable[str]] = None,
    feature_set: Optional[str | FeatureSet] = None,
) -> T:
    """
    Register declarative attributes for a class.

    Only the keyword arguments that are not None are applied; attributes
    registered earlier for the same class are kept.

    Args:
        cls: Flag class to annotate
        label: Display label
        description: Human-readable description
        route: Route name used to build the feature's href
        tags: Tags for filtering
        feature_set: Feature set name or FeatureSet

    Returns:
        The class, unchanged
    """
    changes = {}
    if label is not None:
        changes["label"] = label
    if description is not None:
        changes["description"] = description
    if route is not None:
        changes["route"] = route
    if isinstance(tags, str):
        changes["tags"] = (tags,)
    elif tags is not None:
        changes["tags"] = tuple(tags)
    if feature_set is not None:
        if isinstance(feature_set, str):
            feature_set = FeatureSet(feature_set)
        changes["feature_set"] = feature_set

    current = _ATTRIBUTE_REGISTRY.get(cls, FeatureAttributes())
    _ATTRIBUTE_REGISTRY[cls] = dataclasses.replace(current, **changes)
    return cls


def clear_attributes(cls: type) -> None:
    """Forget every attribute registered for a class."""
    _ATTRIBUTE_REGISTRY.pop(cls, None)


def label(value: str) -> Callable[[T], T]:
    """Decorator declaring a feature's display label."""
    def decorator(cls: T) -> T:
        return register_attributes(cls, label=value)
    return decorator


def description(value: str) -> Callable[[T], T]:
    """Decorator declaring a feature's description."""
    def decorator(cls: T) -> T:
        return register_attributes(cls, description=value)
    return decorator


def route(value: str) -> Callable[[T], T]:
    """Decorator declaring the route name a feature links to."""
    def decorator(cls: T) -> T:
        return register_attributes(cls, route=value)
    return decorator


def tags(*values: str) -> Callable[[T], T]:
    """Decorator declaring a feature's tags.

    ``@tags()`` with no arguments declares an empty tag list.
    """
    def decorator(cls: T) -> T:
        return register_attributes(cls, tags=values)
    return decorator


def feature_set(name: str, label: Optional[str] = None) -> Callable[[T], T]:
    """Decorator declaring the feature set a feature belongs to."""
    def decorator(cls: T) -> T:
        return register_attributes(cls, feature_set=FeatureSet(name, label))
    return decorator
