"""Exit codes and fixed prompt values for the setup wizard."""

SETUP_SUCCESS = 0  # All requested steps ran, or the operator stopped early on purpose
SETUP_FAILED = 1  # Fatal step failure or prompt cancelled (Ctrl+C)

LOCATION_CURRENT = "Current"
LOCATION_NEW = "New"

PROJECT_NAME_PATTERN = r"^[a-zA-Z0-9_-]+$"
PROJECT_NAME_ERROR = (
    "Project name can only contain letters, numbers, hyphens, and underscores"
)
