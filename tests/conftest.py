"""Shared pytest fixtures for hoist tests.

Discovery tests scan tests/fixtures/features, which is importable as the
tests.fixtures.features package. Tests that need their own flag files use
flag_package to write a uniquely named package into tmp_path.
"""

import textwrap
import uuid
from collections.abc import Callable
from pathlib import Path

import pytest

from hoist.collaborators import StaticRouter
from hoist.discovery import FeatureDiscovery
from tests.helpers import FakeEvaluator

FEATURE_NAMESPACE = "tests.fixtures.features"


# =============================================================================
# Path Fixtures
# =============================================================================


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def features_dir(fixtures_dir: Path) -> Path:
    """Return the directory of fixture feature classes."""
    return fixtures_dir / "features"


# =============================================================================
# Discovery Fixtures
# =============================================================================


@pytest.fixture
def router() -> StaticRouter:
    """Router that knows the interface feature's route only."""
    return StaticRouter({"features.interface": "/features/interface"})


@pytest.fixture
def evaluator() -> FakeEvaluator:
    """Evaluator with sample-feature and interface-feature active."""
    return FakeEvaluator(active={"sample-feature", "interface-feature"})


@pytest.fixture
def discovery(
    features_dir: Path,
    router: StaticRouter,
    evaluator: FakeEvaluator,
) -> FeatureDiscovery:
    """Registry over the fixture feature directory."""
    return FeatureDiscovery(
        {features_dir: FEATURE_NAMESPACE},
        router=router,
        evaluator=evaluator,
    )


@pytest.fixture
def flag_package(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Callable[..., tuple[Path, str]]:
    """Factory writing flag modules into a fresh importable package.

    Usage:
        directory, namespace = flag_package({"Alpha.py": "class Alpha: ..."})

    Returns:
        (feature directory, module namespace) ready for FeatureDiscovery
    """
    monkeypatch.syspath_prepend(str(tmp_path))

    def _create(files: dict[str, str], subdir: str = "flags") -> tuple[Path, str]:
        package = f"hoist_test_{uuid.uuid4().hex[:12]}"
        package_dir = tmp_path / package
        directory = package_dir / subdir
        directory.mkdir(parents=True)
        (package_dir / "__init__.py").write_text("")
        (directory / "__init__.py").write_text("")

        for relative, source in files.items():
            path = directory / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(textwrap.dedent(source))

        return directory, f"{package}.{subdir}"

    return _create


# =============================================================================
# State Management Fixtures
# =============================================================================


@pytest.fixture
def temp_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a temporary project directory and make it the cwd.

    Environment overrides are cleared so only the project's files count.
    """
    project = tmp_path / "test-project"
    project.mkdir()
    monkeypatch.chdir(project)
    monkeypatch.delenv("HOIST_CONFIG_PATH", raising=False)
    monkeypatch.delenv("HOIST_LOG_LEVEL", raising=False)
    return project
