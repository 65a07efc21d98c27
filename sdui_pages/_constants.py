"""Common literal values used across sdui_pages.

These constants keep config filenames, environment names, and fallback copy
centralized so the loader, builders, and tests import the same values without
drifting. Intended for internal use within the sdui_pages package.

Examples
--------
>>> from sdui_pages import _constants
>>> _constants.CONFIG_FILENAMES[0]
'config.yaml'
>>> _constants.HOME_SLUG
'/'
"""

CONFIG_FILENAMES: tuple[str, ...] = ("config.yaml", "config.yml", "config.json")
DEFAULT_CONFIG_DIR = "config"
DEFAULT_OUTPUT_DIR = "public"

HOME_SLUG = "/"
HOME_TITLE = "Home"

PRODUCTION = "production"
DEVELOPMENT = "development"

EMPTY_PAGE_MESSAGE = "No sections configured for this page."
DEFAULT_SITE_DESCRIPTION = "Welcome to our website"
