"""Store collection names for the course resource catalog.

The document store has no DDL. Collections come into existence on the first
write, so these constants are the single source of truth for the wire-level
collection identifiers. Keys are the stable names used by stats and search.
"""

COLLECTION_RECORDINGS = "course_recordings"
COLLECTION_DOCUMENTATION = "documentation_resources"
COLLECTION_VSCODE_EXTENSIONS = "vscode_extensions"
COLLECTION_YOUTUBE_CHANNELS = "youtube_channels"
COLLECTION_SOFTWARE_TOOLS = "software_tools"
COLLECTION_PRACTICE_ACTIVITIES = "practice_activities"
COLLECTION_GITHUB_REPOS = "github_repositories"

COLLECTIONS: dict[str, str] = {
    "RECORDINGS": COLLECTION_RECORDINGS,
    "DOCUMENTATION": COLLECTION_DOCUMENTATION,
    "VSCODE_EXTENSIONS": COLLECTION_VSCODE_EXTENSIONS,
    "YOUTUBE_CHANNELS": COLLECTION_YOUTUBE_CHANNELS,
    "SOFTWARE_TOOLS": COLLECTION_SOFTWARE_TOOLS,
    "PRACTICE_ACTIVITIES": COLLECTION_PRACTICE_ACTIVITIES,
    "GITHUB_REPOS": COLLECTION_GITHUB_REPOS,
}

ALL_COLLECTIONS = "all"
