"""
Feature Class Scanner

Walks a feature directory and maps each Python file to the flag class it is
expected to define, following the one-class-per-file convention:

    <root>/new_checkout.py          ->  <namespace>.new_checkout:NewCheckout
    <root>/billing/InvoicePreview.py ->  <namespace>.billing.InvoicePreview:InvoicePreview

Handles use entry-point notation (``module:ClassName``). The module must be
importable in the running process; the scanner never touches sys.path.

Candidates that cannot be imported, do not define the expected class, or are
not flag classes are skipped. A broken file never aborts a scan.
"""

import importlib
import inspect
import logging
from pathlib import Path

from hoist.contracts import Feature
from hoist.text import studly

logger = logging.getLogger(__name__)

SOURCE_SUFFIX = ".py"

# Directories never descended into
SKIP_DIRECTORIES = {"__pycache__"}


def handle_for_path(path: Path | str, root: Path | str, namespace: str) -> str | None:
    """
    Map a source file to the handle of the class it should define.

    Pure string/path manipulation, nothing is imported.

    Args:
        path: Path of the source file
        root: Feature directory the file was found in
        namespace: Dotted module prefix of the directory (may be empty for
            top-level modules)

    Returns:
        Handle like "app.features.billing.new_checkout:NewCheckout", or None
        if the file is outside root, is not a Python file, or does not map
        to a valid module path
    """
    path = Path(path)
    if path.suffix != SOURCE_SUFFIX:
        return None

    try:
        relative = path.relative_to(root)
    except ValueError:
        return None

    segments = list(relative.with_suffix("").parts)
    if not segments:
        return None
    if namespace:
        segments = namespace.strip(".").split(".") + segments
    if not all(segment.isidentifier() for segment in segments):
        return None

    class_name = studly(path.stem)
    if not class_name.isidentifier():
        return None

    return f"{'.'.join(segments)}:{class_name}"


def load_type(handle: str) -> type:
    """
    Import the class a handle refers to.

    Raises:
        ValueError: If the handle is not in "module:ClassName" form
        ImportError: If the module cannot be imported
        AttributeError: If the module does not define the class
    """
    module_name, sep, class_name = handle.partition(":")
    if not sep or not module_name or not class_name:
        raise ValueError(f"Invalid feature handle: '{handle}'")
    module = importlib.import_module(module_name)
    return getattr(module, class_name)


def is_feature_class(obj: object) -> bool:
    """
    Check whether an object is a concrete flag class.

    A flag class is a concrete (non-abstract, non-protocol) class that either
    subclasses Feature or exposes a callable ``resolve`` for compatibility
    with flags written directly against the evaluation engine.
    """
    if not inspect.isclass(obj):
        return False
    # typing has no public protocol check before 3.13 (typing.is_protocol)
    if inspect.isabstract(obj) or getattr(obj, "_is_protocol", False):
        return False
    return issubclass(obj, Feature) or callable(getattr(obj, "resolve", None))


def iter_source_files(root: Path) -> list[Path]:
    """List Python source files under root, sorted, skipping hidden and private ones."""
    files = []
    for source in sorted(root.rglob(f"*{SOURCE_SUFFIX}")):
        relative_parts = source.relative_to(root).parts
        if any(part.startswith(".") or part in SKIP_DIRECTORIES for part in relative_parts[:-1]):
            continue
        if source.stem.startswith(("_", ".")) or not source.is_file():
            continue
        files.append(source)
    return files


def scan_directory(root: Path | str, namespace: str) -> tuple[str, ...]:
    """
    Scan a feature directory for flag classes.

    Args:
        root: Directory to scan recursively
        namespace: Dotted module prefix the directory is importable under

    Returns:
        Handles of the flag classes found, in file enumeration order. Empty
        if the directory does not exist.
    """
    root = Path(root)
    if not root.is_dir():
        logger.debug(f"Feature directory not found, skipping: {root}")
        return ()

    handles: list[str] = []
    for source in iter_source_files(root):
        handle = handle_for_path(source, root, namespace)
        if handle is None:
            logger.debug(f"No importable module path for {source}")
            continue

        try:
            candidate = load_type(handle)
        except Exception as e:
            # Import side effects of arbitrary user modules can raise anything
            logger.debug(f"Skipping {handle}: {type(e).__name__}: {e}")
            continue

        if not is_feature_class(candidate):
            logger.debug(f"Skipping {handle}: not a concrete feature class")
            continue

        handles.append(handle)

    return tuple(handles)
