# src/seo_linter/utils/path_utils.py
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class PathUtils:
    """
    A central utility for reliably retrieving important package paths.
    """

    @staticmethod
    def get_package_root() -> Path:
        """Returns the absolute path of the installed 'seo_linter' package."""
        return Path(__file__).resolve().parent.parent

    @staticmethod
    def get_settings_path() -> Path:
        return PathUtils.get_package_root() / "settings.json"

    @staticmethod
    def resolve_user_path(path_str: str) -> Path:
        """
        Resolves a user supplied path (rules dir, route config) against the
        current working directory, expanding '~'.
        """
        path = Path(path_str).expanduser()
        if not path.is_absolute():
            path = Path.cwd() / path
        resolved = path.resolve()
        logger.debug("Resolved '%s' to %s", path_str, resolved)
        return resolved
