"""Risk and audit badges — case-insensitive lookup with a neutral fallback."""

from __future__ import annotations

from dataclasses import dataclass

BASE_CLASSES = "inline-flex items-center px-2.5 py-0.5 rounded-full text-xs font-medium"

GREEN = "bg-green-100 text-green-800 dark:bg-green-900 dark:text-green-200"
YELLOW = "bg-yellow-100 text-yellow-800 dark:bg-yellow-900 dark:text-yellow-200"
RED = "bg-red-100 text-red-800 dark:bg-red-900 dark:text-red-200"
GRAY = "bg-gray-100 text-gray-800 dark:bg-gray-900 dark:text-gray-200"


def cn(*classes: str | None) -> str:
    """Join CSS class strings, skipping empty ones."""
    return " ".join(c for c in classes if c)


@dataclass(frozen=True)
class Badge:
    label: str
    tone: str  # low / medium / high / verified / unverified / neutral
    css_class: str
    icon: str | None = None  # lucide icon name


_RISK_BADGES: dict[str, tuple[str, str, str]] = {
    "low": ("Low Risk", GREEN, "shield-check"),
    "medium": ("Medium Risk", YELLOW, "shield"),
    "high": ("High Risk", RED, "shield-alert"),
}

_AUDIT_BADGES: dict[str, tuple[str, str, str, str]] = {
    "verified": ("Verified", "verified", GREEN, "check-circle"),
    "audited": ("Verified", "verified", GREEN, "check-circle"),
    "unverified": ("Unverified", "unverified", RED, "x-circle"),
    "not audited": ("Unverified", "unverified", RED, "x-circle"),
}


def risk_badge(risk_level: str) -> Badge:
    key = risk_level.lower()
    known = _RISK_BADGES.get(key)
    if known is None:
        return Badge(risk_level, "neutral", cn(BASE_CLASSES, GRAY), "shield")
    label, colors, icon = known
    return Badge(label, key, cn(BASE_CLASSES, colors), icon)


def audit_badge(status: str) -> Badge:
    known = _AUDIT_BADGES.get(status.lower())
    if known is None:
        return Badge(status, "neutral", cn(BASE_CLASSES, GRAY))
    label, tone, colors, icon = known
    return Badge(label, tone, cn(BASE_CLASSES, colors), icon)
