"""Shared constants for the WordPress CI action."""

from pathlib import Path

# Container
DEFAULT_IMAGE = "ghcr.io/yookoala/wordpress-ci:latest"
CONTAINER_NAME = "wordpress-ci"
PUBLISH = "8080:80"
WORDPRESS_CI_URL = "http://localhost:8080"

# Paths inside the WordPress container
WP_CONTENT_DIR = Path("/var/www/html/wp-content")
PLUGINS_DIR = WP_CONTENT_DIR / "plugins"
THEMES_DIR = WP_CONTENT_DIR / "themes"
SQL_IMPORT_PATH = Path("/opt/imports/import.sql")

# Proxy script installed on the runner
PROXY_SCRIPT_PATH = Path("/usr/local/bin/wpci-cmd")

# Readiness polling
WAIT_TIMEOUT_MS = 10_000
WAIT_INTERVAL_MS = 500
