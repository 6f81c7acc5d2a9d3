"""
Centralized version information
"""

from config.settings import settings


def get_version() -> str:
    """
    Gets the application version from settings

    Returns:
        str: Application version
    """
    return settings.version


def get_app_name() -> str:
    """
    Gets the application name from settings

    Returns:
        str: Application name
    """
    return settings.app_name


def get_full_version_info() -> dict:
    return {
        "app_name": get_app_name(),
        "app_version": get_version(),
    }
