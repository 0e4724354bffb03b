"""Constants and defaults.

Note: Keep the seeded roster here so it is not scattered across code.
"""

DEFAULT_CLASS_NAME = "Main Batch 2024"
DEFAULT_CLASS_GROUPS = {
    "Main Batch Students": [160623733128, 160623733192],
    "Lateral Entries": [1606237333313, 1606237333318],
}

# Label used by the summary when no class is active.
FALLBACK_CLASS_LABEL = "Class"
