# Copyright (c) 2026 Pixelhue
# SPDX-License-Identifier: MIT

"""
Serializers for handing picked colors to export targets and the clipboard.

Serializers never modify the color; they only format it.
"""

from pixelhue.runtime.serializers.base import ExportTarget, ReportFormat
from pixelhue.runtime.serializers.report import to_report
from pixelhue.runtime.serializers.snippet import to_snippet, to_snippets

__all__ = [
    "ExportTarget",
    "ReportFormat",
    "to_snippet",
    "to_snippets",
    "to_report",
]
