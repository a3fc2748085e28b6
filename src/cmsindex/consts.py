"""Constants for cmsindex"""

# ==================== File Paths ====================
CONFIG_PATH_DEFAULT = "config.toml"
LOG_FILE_DEFAULT = "data/cmsindex.log"

# ==================== Settings ====================
ENV_PREFIX = "CMSINDEX_"
ENV_NESTED_DELIMITER = "__"

# ==================== Schema ====================
DEFAULT_TYPE_KEY = "type"
KEY_PATH_DELIMITER = "."
MEDIA_WIDGETS = frozenset({"image", "file"})

# ==================== Locales ====================
# Locale key under which content is stored when a collection has no i18n
DEFAULT_LOCALE_KEY = "default"
SLUG_PROPERTY = "slug"

# ==================== Media URLs ====================
ABSOLUTE_URL_PREFIXES = ("http:", "https:", "blob:", "data:")
