"""import-boundaries: architectural import boundary enforcement."""

from import_boundaries.config import Settings, build_registry, load_settings
from import_boundaries.defaults import hexagonal_defaults, simple_defaults
from import_boundaries.engine.handler import handle_import
from import_boundaries.lint.linter import lint_paths, lint_source
from import_boundaries.main import app


__version__ = "0.1.0"

__all__ = [
    "app",
    "build_registry",
    "handle_import",
    "hexagonal_defaults",
    "lint_paths",
    "lint_source",
    "load_settings",
    "Settings",
    "simple_defaults",
    "__version__",
]
