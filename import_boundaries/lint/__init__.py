"""Lint adapter: scan source files, run the engine, report and fix.

Exports:
    scan_imports: Extract import statements from source text.
    lint_source: Lint source text for a given file path.
    lint_paths: Lint files and directories.
    apply_fixes: Apply violation fixes to source text.
    render_message: Render a violation as user-facing text.
"""

from import_boundaries.lint.fixes import (
    LiteralFixer as LiteralFixer,
    apply_fixes as apply_fixes,
)
from import_boundaries.lint.linter import (
    CollectingReporter as CollectingReporter,
    FileReport as FileReport,
    Finding as Finding,
    LintReport as LintReport,
    lint_file as lint_file,
    lint_paths as lint_paths,
    lint_source as lint_source,
    render_message as render_message,
)
from import_boundaries.lint.scanner import scan_imports as scan_imports
