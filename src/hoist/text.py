"""String case helpers used for class names, file names and labels."""

import re

# Word boundaries: explicit separators, lower->Upper and ACRONYMWord transitions
_SEPARATORS = re.compile(r"[\s_\-./\\]+")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def words(value: str) -> list[str]:
    """Split a string into words on separators and case changes.

    Examples:
        words("NewCheckout") -> ["New", "Checkout"]
        words("new-checkout_flow") -> ["new", "checkout", "flow"]
        words("HTTPClient") -> ["HTTP", "Client"]
    """
    result = []
    for chunk in _SEPARATORS.split(value):
        if chunk:
            result.extend(part for part in _CAMEL_BOUNDARY.split(chunk) if part)
    return result


def studly(value: str) -> str:
    """Convert to StudlyCase (class-name case): "new_checkout" -> "NewCheckout"."""
    return "".join(word[0].upper() + word[1:] for word in words(value))


def kebab(value: str) -> str:
    """Convert to kebab-case: "NewCheckout" -> "new-checkout"."""
    return "-".join(word.lower() for word in words(value))


def snake(value: str) -> str:
    """Convert to snake_case: "NewCheckout" -> "new_checkout"."""
    return "_".join(word.lower() for word in words(value))


def headline(value: str) -> str:
    """Convert to a space separated title: "new_checkout" -> "New Checkout"."""
    return " ".join(word[0].upper() + word[1:] for word in words(value))
