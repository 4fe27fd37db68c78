# Copyright (c) 2026 Pixelhue
# SPDX-License-Identifier: MIT

"""Base types for serializers."""

from enum import Enum


class ExportTarget(Enum):
    """Code snippet target for the export layer."""

    TAILWIND = "tailwind"
    CSS_VARIABLE = "css_variable"
    SWIFTUI = "swiftui"


class ReportFormat(Enum):
    """Output format for color reports."""

    TEXT = "text"
    JSON = "json"
