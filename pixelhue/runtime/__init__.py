# Copyright (c) 2026 Pixelhue
# SPDX-License-Identifier: MIT

"""
Delivery runtime for Pixelhue.

Formats picked colors for the layers outside the engine:

1. Export snippets -- Tailwind config entry, CSS variable, SwiftUI color
2. Reports -- plain text or JSON for the clipboard

The delivery layer never modifies color content.
"""

from pixelhue.runtime.serializers import (
    ExportTarget,
    ReportFormat,
    to_report,
    to_snippet,
    to_snippets,
)

__all__ = [
    "to_snippet",
    "to_snippets",
    "to_report",
    "ExportTarget",
    "ReportFormat",
]
