"""
Static token-replacement tables.

Each table maps a legacy literal class string to its canonical
replacement literal. Lookups are by exact string, never by pattern, so
only the literals listed here are auto-fixable.

Replacement values must never contain a literal that the owning rule
would flag again, otherwise a second ``--fix`` run would not converge.
"""

from typing import Dict


THEME_TOKEN_REPLACEMENTS: Dict[str, str] = {
    # The bare white/black entries have no numeric shade, so the color
    # rule never emits them; they stay so the table mirrors the token map.
    "bg-white": "bg-pr-surface-card",
    "bg-gray-50": "bg-pr-surface-2",
    "bg-gray-100": "bg-pr-surface-2",
    "bg-gray-200": "bg-pr-surface-3",
    "bg-gray-300": "bg-pr-surface-3",
    "bg-black": "bg-pr-surface-1 dark:bg-pr-surface-1",
    "text-gray-900": "text-pr-text-1",
    "text-gray-800": "text-pr-text-1",
    "text-gray-700": "text-pr-text-1",
    "text-gray-600": "text-pr-text-2",
    "text-gray-500": "text-pr-text-2",
    "text-white": "text-pr-text-1",
    "text-black": "text-pr-text-1",
    "border-gray-200": "border-pr-surface-3",
    "border-gray-300": "border-pr-surface-3",
    "border-white": "border-pr-surface-3",
}

DEPRECATED_LAYOUT_REPLACEMENTS: Dict[str, str] = {
    "max-w-screen-xl": "max-w-[1600px] 2xl:max-w-[1800px]",
    "max-w-screen-lg": "max-w-[1600px]",
    "container px-4": "max-w-[1600px] 2xl:max-w-[1800px] mx-auto px-4 md:px-6 xl:px-8 2xl:px-12",
}

# Suggested wide-screen container used by advisory width issues.
FLUID_MAX_WIDTH = "max-w-[1600px] 2xl:max-w-[1800px]"
