"""grammardocs - output-generation core for grammar documentation exports.

Selects the rendering template for an export, resolves localized
user-facing text and derives the output locations of exported artifacts.
"""

PACKAGE_ROOT = "grammardocs"

__version__ = "1.0.0"
