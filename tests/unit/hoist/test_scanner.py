"""Unit tests for the feature class scanner.

Path mapping is tested without a filesystem; scanning uses the fixture
package tests/fixtures/features and throwaway packages from flag_package.
"""

from pathlib import Path

import pytest

from hoist.contracts import Feature
from hoist.scanner import (
    handle_for_path,
    is_feature_class,
    iter_source_files,
    load_type,
    scan_directory,
)
from tests.conftest import FEATURE_NAMESPACE

EXPECTED_HANDLES = (
    f"{FEATURE_NAMESPACE}.another_feature:AnotherFeature",
    f"{FEATURE_NAMESPACE}.attribute_feature:AttributeFeature",
    f"{FEATURE_NAMESPACE}.billing.invoice_preview:InvoicePreview",
    f"{FEATURE_NAMESPACE}.interface_feature:InterfaceFeature",
    f"{FEATURE_NAMESPACE}.mixed_feature:MixedFeature",
    f"{FEATURE_NAMESPACE}.sample_feature:SampleFeature",
)


class TestHandleForPath:
    """Tests for the pure path -> handle mapping."""

    def test_maps_top_level_file(self):
        """A file directly in root maps to namespace.module:Class."""
        handle = handle_for_path("/app/features/new_checkout.py", "/app/features", "app.features")
        assert handle == "app.features.new_checkout:NewCheckout"

    def test_maps_nested_file(self):
        """Sub-directories become sub-packages."""
        handle = handle_for_path(
            Path("/app/features/billing/InvoicePreview.py"),
            Path("/app/features"),
            "app.features",
        )
        assert handle == "app.features.billing.InvoicePreview:InvoicePreview"

    def test_capitalised_file_keeps_class_name(self):
        """A StudlyCase file name is already the class name."""
        assert handle_for_path("/flags/Alpha.py", "/flags", "App.Features") == "App.Features.Alpha:Alpha"

    def test_trailing_dots_in_namespace_ignored(self):
        """Namespace dots at either end are stripped."""
        assert handle_for_path("/f/alpha.py", "/f", ".app.") == "app.alpha:Alpha"

    def test_empty_namespace_maps_to_top_level_module(self):
        """No namespace means the directory is itself on sys.path."""
        assert handle_for_path("/f/alpha.py", "/f", "") == "alpha:Alpha"

    def test_rejects_other_extensions(self):
        """Only .py files map to handles."""
        assert handle_for_path("/f/alpha.txt", "/f", "app") is None
        assert handle_for_path("/f/alpha.pyc", "/f", "app") is None

    def test_rejects_paths_outside_root(self):
        """Files outside root do not map."""
        assert handle_for_path("/elsewhere/alpha.py", "/f", "app") is None

    def test_rejects_invalid_module_names(self):
        """Segments that are not identifiers cannot be imported."""
        assert handle_for_path("/f/new-checkout.py", "/f", "app") is None
        assert handle_for_path("/f/my dir/alpha.py", "/f", "app") is None
        assert handle_for_path("/f/alpha.py", "/f", "my-app") is None


class TestLoadType:
    """Tests for load_type."""

    def test_loads_class(self):
        """A valid handle imports the class."""
        cls = load_type(f"{FEATURE_NAMESPACE}.sample_feature:SampleFeature")
        assert cls.__name__ == "SampleFeature"

    def test_invalid_handle_format(self):
        """Handles without a colon are rejected."""
        with pytest.raises(ValueError):
            load_type("tests.fixtures.features.sample_feature")

    def test_missing_module(self):
        """Unknown modules raise ImportError."""
        with pytest.raises(ImportError):
            load_type("tests.fixtures.features.does_not_exist:DoesNotExist")

    def test_missing_class(self):
        """Modules without the class raise AttributeError."""
        with pytest.raises(AttributeError):
            load_type(f"{FEATURE_NAMESPACE}.helpers:Helpers")


class TestIsFeatureClass:
    """Tests for flag class validation."""

    def test_feature_subclass(self):
        """Concrete Feature subclasses are flag classes."""

        class Concrete(Feature):
            def resolve(self, scope):
                return True

        assert is_feature_class(Concrete)

    def test_duck_typed_resolve(self):
        """Classes exposing resolve() are flag classes without the base class."""

        class Duck:
            def resolve(self, scope):
                return True

        assert is_feature_class(Duck)

    def test_abstract_class_rejected(self):
        """Abstract classes are rejected even with the right shape."""

        class Incomplete(Feature):
            pass

        assert not is_feature_class(Incomplete)
        assert not is_feature_class(Feature)

    def test_protocol_rejected(self):
        """Protocols are contracts, not flag classes."""
        protocol = load_type(f"{FEATURE_NAMESPACE}.feature_protocol:FeatureProtocol")
        assert not is_feature_class(protocol)

    def test_class_without_resolve_rejected(self):
        """Classes with neither the contract nor resolve() are rejected."""

        class Plain:
            name = "plain"

        assert not is_feature_class(Plain)

    def test_non_callable_resolve_rejected(self):
        """A resolve attribute must be callable."""

        class Data:
            resolve = True

        assert not is_feature_class(Data)

    def test_non_class_rejected(self):
        """Functions and instances are not flag classes."""

        def resolve(scope):
            return True

        assert not is_feature_class(resolve)
        assert not is_feature_class(object())


class TestScanDirectory:
    """Tests for scanning the fixture features directory."""

    def test_discovers_fixture_features(self, features_dir: Path):
        """Exactly the concrete flag classes are found, in file order."""
        assert scan_directory(features_dir, FEATURE_NAMESPACE) == EXPECTED_HANDLES

    def test_never_includes_abstract_or_protocol(self, features_dir: Path):
        """Abstract classes and protocols are never discovered."""
        handles = scan_directory(features_dir, FEATURE_NAMESPACE)
        assert not any("AbstractFeature" in h or "FeatureProtocol" in h for h in handles)

    def test_skips_broken_and_non_feature_modules(self, features_dir: Path):
        """Modules that fail to import or define no flag class are skipped."""
        handles = scan_directory(features_dir, FEATURE_NAMESPACE)
        for skipped in ("broken_feature", "helpers", "not_a_feature", "secret_feature", "_private"):
            assert not any(skipped in handle for handle in handles)

    def test_missing_directory_returns_empty(self, tmp_path: Path):
        """Scanning a directory that does not exist returns an empty tuple."""
        assert scan_directory(tmp_path / "NonExistent", "Test.NonExistent") == ()

    def test_file_instead_of_directory_returns_empty(self, tmp_path: Path):
        """A file path is not a directory to scan."""
        file_path = tmp_path / "flags.py"
        file_path.write_text("")
        assert scan_directory(file_path, "flags") == ()

    def test_wrong_namespace_finds_nothing(self, features_dir: Path):
        """A namespace that does not match the directory imports nothing."""
        assert scan_directory(features_dir, "no.such.namespace") == ()

    def test_syntax_error_does_not_abort_scan(self, flag_package):
        """One malformed file is skipped; the rest are still found."""
        directory, namespace = flag_package(
            {
                "aaa_broken.py": "class AaaBroken(:\n",
                "zed.py": """
                    class Zed:
                        def resolve(self, scope):
                            return True
                """,
            }
        )

        assert scan_directory(directory, namespace) == (f"{namespace}.zed:Zed",)

    def test_mismatched_class_name_skipped(self, flag_package):
        """A file whose class does not match the file name is skipped."""
        directory, namespace = flag_package(
            {
                "checkout.py": """
                    class SomethingElse:
                        def resolve(self, scope):
                            return True
                """,
            }
        )

        assert scan_directory(directory, namespace) == ()


class TestIterSourceFiles:
    """Tests for source file enumeration."""

    def test_skips_hidden_private_and_non_python(self, features_dir: Path):
        """Hidden directories, private modules and other files are skipped."""
        names = [path.name for path in iter_source_files(features_dir)]

        assert "secret_feature.py" not in names
        assert "_private_feature.py" not in names
        assert "__init__.py" not in names
        assert "notes.txt" not in names
        assert "sample_feature.py" in names

    def test_sorted(self, features_dir: Path):
        """Files are returned in sorted order."""
        files = iter_source_files(features_dir)
        assert files == sorted(files)
