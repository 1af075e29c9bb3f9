"""contrast_checker.core — Foundation layer.

Contains colour parsing, WCAG contrast maths, HSL/RGB conversion, the brand
palette tables, the palette file parser, types, and the report builder.
This module has NO dependencies on contrast_checker.checks or contrast_checker.registry.
Only stdlib, numpy, and PIL are allowed here.
"""
