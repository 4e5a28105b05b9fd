"""
Accepted values for field settings.

The host runtime matches these strings literally. Only some setters validate
against them; the rest are listed for reference.
"""

from __future__ import annotations

# ── Validated by setters ──────────────────────────────────────────────────────

COUNTRY_APPEARANCES: tuple[str, ...] = ("checkbox", "multi_select", "select", "radio")
COUNTRY_RETURN_FORMATS: tuple[str, ...] = ("array", "name", "code")
DIRECTION_LAYOUTS: tuple[str, ...] = ("horizontal", "vertical")
LIBRARIES: tuple[str, ...] = ("all", "uploadedTo")
RETURN_FORMATS: tuple[str, ...] = ("array", "id", "label", "object", "url", "value")
SUB_FIELD_LAYOUTS: tuple[str, ...] = ("block", "row", "table")

# ── Documented, not validated ─────────────────────────────────────────────────

BUTTON_TYPES: tuple[str, ...] = ("button", "submit")
CLONE_DISPLAYS: tuple[str, ...] = ("group", "seamless")
MODAL_SIZES: tuple[str, ...] = ("small", "medium", "large", "xlarge", "full")
COLUMN_WIDTHS: tuple[str, ...] = ("auto", "fill", *(f"{n}/12" for n in range(1, 13)))
CODE_EDITOR_MODES: tuple[str, ...] = (
    "text/html",
    "javascript",
    "application/x-json",
    "css",
    "application/x-httpd-php",
    "text/x-php",
)
FLEXIBLE_ACTIONS: tuple[str, ...] = ("title", "toggle", "copy", "lock", "close")

DEFAULT_CUSTOM_RANGES: tuple[str, ...] = (
    "Today",
    "Yesterday",
    "Last 7 Days",
    "Last 30 Days",
    "This Month",
    "Last Month",
)
DEFAULT_MAP_LAYERS: tuple[str, ...] = ("Stadia.OSMBright",)
