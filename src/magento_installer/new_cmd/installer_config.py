"""Installer configuration: archive location, defaults and process policy."""

import os
import shutil
from dataclasses import dataclass, field

DOWNLOAD_URL = "https://github.com/magento/magento2/archive/"
APP_LATEST_VERSION = "2.4.0"
COMPOSER_PHAR = "composer.phar"
WRITABLE_DIRECTORY_MODE = 0o700

# The install chain exit status is reported, not propagated, unless strict.
FAIL_ON_INSTALL_ERROR = False

ENV_BASE_URL = "MAGENTO_INSTALLER_BASE_URL"
ENV_DEFAULT_VERSION = "MAGENTO_INSTALLER_DEFAULT_VERSION"
ENV_PHP = "MAGENTO_INSTALLER_PHP"
ENV_STRICT = "MAGENTO_INSTALLER_STRICT"

_TRUE_VALUES = ("1", "true", "yes", "on")


def _default_php_binary():
    return shutil.which("php") or "php"


@dataclass
class InstallerConfig:
    """Settings shared by every step of the new command."""

    base_url: str = DOWNLOAD_URL
    default_version: str = APP_LATEST_VERSION
    composer_phar: str = COMPOSER_PHAR
    php_binary: str = field(default_factory=_default_php_binary)
    directory_mode: int = WRITABLE_DIRECTORY_MODE
    fail_on_install_error: bool = FAIL_ON_INSTALL_ERROR

    def archive_url(self, version):
        """Build the download URL of the archive for *version*."""
        return f"{self.base_url}{version}.tar.gz"


def load_installer_config(environ=None):
    """Build an InstallerConfig, applying overrides from the environment.

    Args:
        environ: Mapping to read overrides from (defaults to os.environ)

    Returns:
        InstallerConfig
    """
    if environ is None:
        environ = os.environ

    config = InstallerConfig()
    base_url = environ.get(ENV_BASE_URL, "").strip()
    if base_url:
        if not base_url.endswith("/"):
            base_url += "/"
        config.base_url = base_url

    default_version = environ.get(ENV_DEFAULT_VERSION, "").strip()
    if default_version:
        config.default_version = default_version

    php_binary = environ.get(ENV_PHP, "").strip()
    if php_binary:
        config.php_binary = php_binary

    strict = environ.get(ENV_STRICT, "").strip().lower()
    if strict:
        config.fail_on_install_error = strict in _TRUE_VALUES

    return config
