"""The hoist make command: scaffold a new feature flag class."""

import re
from pathlib import Path

import typer

import hoist
from hoist.config import DEFAULT_FEATURE_DIRECTORIES, get_feature_directories
from hoist.text import headline, kebab, snake, studly

from .console import print_error, print_success
from .project import load_project_config

# Published override, relative to the project root
STUB_OVERRIDE = Path("stubs") / "hoist-feature" / "hoist-feature.stub"
PACKAGED_STUB = Path(hoist.__file__).parent / "stubs" / "feature.stub"

PLACEHOLDERS = ("class", "kebab", "label")


def get_stub_path(project_root: Path) -> Path:
    """Return the published stub if the project has one, else the packaged stub."""
    published = project_root / STUB_OVERRIDE
    if published.is_file():
        return published
    return PACKAGED_STUB


def split_name(name: str) -> tuple[list[str], str]:
    """Split "Billing/NewCheckout" into (["Billing"], "NewCheckout")."""
    parts = [part for part in re.split(r"[\\/]+", name.strip()) if part]
    if not parts:
        raise ValueError("Feature name cannot be empty")
    return parts[:-1], parts[-1]


def class_name_for(name: str) -> str:
    """Class name the scanner expects for the file generated from name.

    The file is named snake_case(name), and the scanner derives the class
    name from the file name, so both must agree.
    """
    _, base = split_name(name)
    return studly(snake(base))


def feature_path(directory: Path, name: str) -> Path:
    """
    Path of the source file for a new feature.

    Args:
        directory: Feature directory (first configured root)
        name: Feature name, optionally with "/" separated sub-directories

    Returns:
        directory/<snake sub-dirs>/<snake name>.py

    Raises:
        ValueError: If the name does not produce valid Python module names
    """
    subdirectories, base = split_name(name)
    segments = [snake(part) for part in subdirectories] + [snake(base)]
    if not all(segment.isidentifier() for segment in segments):
        raise ValueError(f"'{name}' does not map to a valid Python module path")
    return Path(directory).joinpath(*segments[:-1], f"{segments[-1]}.py")


def render_stub(stub: str, name: str) -> str:
    """
    Substitute the name placeholders of a stub.

    Both "{{ class }}" and "{{class}}" forms are replaced, for class
    (StudlyCase), kebab (kebab-case) and label (Headline Case).
    """
    _, base = split_name(name)
    values = {
        "class": class_name_for(name),
        "kebab": kebab(base),
        "label": headline(base),
    }
    for key in PLACEHOLDERS:
        stub = stub.replace(f"{{{{ {key} }}}}", values[key])
        stub = stub.replace(f"{{{{{key}}}}}", values[key])
    return stub


def _ensure_packages(directory: Path, target: Path) -> None:
    """Create missing sub-package directories (with __init__.py) below directory."""
    current = directory
    for part in target.relative_to(directory).parts[:-1]:
        current = current / part
        current.mkdir(parents=True, exist_ok=True)
        init_file = current / "__init__.py"
        if not init_file.exists():
            init_file.touch()


def make_command(
    name: str = typer.Argument(..., help="Feature class name, e.g. NewCheckout or Billing/NewCheckout"),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite the feature file if it already exists",
    ),
    config_path: str | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to hoist.yaml (default: search from current directory)",
    ),
) -> None:
    """Create a new feature flag class in the first feature directory."""
    config = load_project_config(config_path)
    project_root = Path(config["base_dir"])

    directories = get_feature_directories(config)
    if not directories:
        directories = {
            str(project_root / directory): namespace
            for directory, namespace in DEFAULT_FEATURE_DIRECTORIES.items()
        }
    directory = Path(next(iter(directories)))

    try:
        path = feature_path(directory, name)
        class_name = class_name_for(name)
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(1)

    if path.exists() and not force:
        print_error(f"Feature already exists: {path}")
        raise typer.Exit(1)

    stub = get_stub_path(project_root).read_text(encoding="utf-8")

    directory.mkdir(parents=True, exist_ok=True)
    _ensure_packages(directory, path)
    path.write_text(render_stub(stub, name), encoding="utf-8")

    print_success(f"Feature [bold]{class_name}[/bold] created: {path}")
