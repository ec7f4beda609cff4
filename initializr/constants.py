"""Exit codes and fixed identifiers for the wizard."""

WIZARD_SUCCESS = 0  # Tool ran and exited 0 (or dry run finished)
WIZARD_FETCH_FAILED = 3  # Metadata could not be fetched
WIZARD_SPAWN_FAILED = 127  # External tool could not be started
WIZARD_CANCELLED = 130  # User interrupted a prompt (Ctrl+C)

DEFAULT_METADATA_URL = "https://start.spring.io/metadata/client"
DEFAULT_ACCEPT = "application/vnd.initializr.v2.2+json"

# Top-level keys the metadata document must carry
LANGUAGE = "language"
BOOT_VERSION = "bootVersion"
PACKAGING = "packaging"
JAVA_VERSION = "javaVersion"
DEPENDENCIES = "dependencies"
REQUIRED_KEYS = (LANGUAGE, BOOT_VERSION, PACKAGING, JAVA_VERSION, DEPENDENCIES)

# Optional text fields; their "default" seeds the free-text prompts
TEXT_FIELDS = {
    "group": "groupId",
    "name": "name",
    "description": "description",
    "version": "version",
}

BANNER_TITLE = "Spring Initializr CLI!"
BANNER_URL = "https://github.com/AlbertLnz/spring-initializr-cli"
BANNER_CREDIT = "Created by AlbertLnz"
