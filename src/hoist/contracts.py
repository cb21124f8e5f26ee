"""Feature Contracts

Defines the explicit feature flag contract and the optional capabilities a
flag class may expose.

A flag class is recognised by the scanner when it either subclasses
``Feature`` or, for classes written directly against the host's evaluation
engine, simply exposes a callable ``resolve(scope)``.

Every other piece of metadata is optional. The capability protocols below
describe the attributes the resolver looks for; a flag class never has to
inherit from them, ``isinstance`` checks only look for the attribute.

Example:
    class NewCheckout(Feature):
        name = "new-checkout"
        label = "New Checkout"
        tags = ["billing", "beta"]

        def resolve(self, scope):
            return False

        def metadata(self):
            return {"owner": "payments"}
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Protocol, Sequence, runtime_checkable


class Feature(ABC):
    """Contract for feature flag classes."""

    @abstractmethod
    def resolve(self, scope: Any) -> Any:
        """Resolve the feature's initial value for the given scope."""


@runtime_checkable
class HasName(Protocol):
    name: str | None


@runtime_checkable
class HasLabel(Protocol):
    label: str | None


@runtime_checkable
class HasDescription(Protocol):
    description: str | None


@runtime_checkable
class HasTags(Protocol):
    tags: Sequence[str] | None


@runtime_checkable
class HasRoute(Protocol):
    route: str | None


@runtime_checkable
class HasFeatureSet(Protocol):
    feature_set: str | None


@runtime_checkable
class HasMetadata(Protocol):
    def metadata(self) -> Mapping[str, Any] | None: ...
