"""Editor option lists and defaults."""

CATEGORY_OPTIONS = [
    "Campus Life",
    "Sports",
    "Arts & Culture",
    "Academics",
    "Opinion",
    "News",
    "Community",
    "Features",
]

ACCENT_OPTIONS = [
    "text-bowman-highlight",
    "text-bowman-secondary",
    "text-bowman-accent",
]

BORDER_OPTIONS = [
    "border-bowman-secondary/30",
    "border-bowman-highlight/30",
    "border-bowman-accent/30",
]

# Category filter value that matches every article
ALL_CATEGORIES = "ALL"

EXPORT_FILENAME = "newspaper.json"

DEFAULT_TITLE = "Untitled Article"
NORMALIZED_TITLE = "Untitled"
COPY_SUFFIX = " (Copy)"
