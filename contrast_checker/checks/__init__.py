"""Auto-discovery of check modules.

Every .py file in this package that defines a `check` object is
auto-registered by contrast_checker.registry.discover(). Modules whose
name starts with an underscore are skipped.
"""
