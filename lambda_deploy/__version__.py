"""Version information for lambda-deploy package"""

__version__ = "1.0.0"
__license__ = "MIT"

# Pre-release suffixes ("1.1.0-rc1") are not part of the tuple
__version_info__ = tuple(int(part) for part in __version__.split("-")[0].split("."))
