"""
netshare Configuration Module
Supports loading from:
1. INI config file (/etc/netshare/netshare.conf)
2. Environment variables (override config file)
3. Default values (fallback)
"""

import os
import logging
from configparser import ConfigParser, Error as ConfigParserError
from typing import Dict, Any, Optional

from netshare.exceptions import ConfigurationException
from netshare.utils.validators import validate_meta_dir, validate_log_level, parse_bool

logger = logging.getLogger(__name__)


class NetshareConfig:
    """netshare Configuration"""

    # Default configuration file path
    CONFIG_FILE = '/etc/netshare/netshare.conf'

    # Default values
    DEFAULT_ROOT = '/var/lib/docker-volumes/netshare'
    DEFAULT_META_DIR = '.meta'
    DEFAULT_LOG_LEVEL = 'INFO'
    DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    DEFAULT_LOG_JSON = 'false'

    def __init__(self, root: Optional[str] = None, meta_dir: Optional[str] = None,
                 log_level: Optional[str] = None, log_format: Optional[str] = None,
                 log_json: bool = False):
        self.root = root or self.DEFAULT_ROOT
        self.meta_dir = meta_dir or self.DEFAULT_META_DIR
        self.log_level = log_level or self.DEFAULT_LOG_LEVEL
        self.log_format = log_format or self.DEFAULT_LOG_FORMAT
        self.log_json = log_json

    @property
    def meta_path(self) -> str:
        return os.path.join(self.root, self.meta_dir)

    @classmethod
    def load_config(cls, config_file: Optional[str] = None,
                    environ: Optional[Dict[str, str]] = None) -> 'NetshareConfig':
        """
        Load configuration from file and environment variables.

        Args:
            config_file: Path to config file (default: /etc/netshare/netshare.conf)
            environ: Environment mapping (default: os.environ)

        Returns:
            NetshareConfig instance
        """
        if config_file is None:
            config_file = cls.CONFIG_FILE
        if environ is None:
            environ = os.environ

        logger.debug(f"Loading config from: {config_file}")
        config_data = cls._load_ini_file(config_file)

        # Priority: env var > config file > default
        config = cls(
            root=environ.get(
                'NETSHARE_ROOT',
                config_data.get('root', cls.DEFAULT_ROOT)
            ),
            meta_dir=environ.get(
                'NETSHARE_META_DIR',
                config_data.get('meta_dir', cls.DEFAULT_META_DIR)
            ),
            log_level=environ.get(
                'NETSHARE_LOG_LEVEL',
                config_data.get('log_level', cls.DEFAULT_LOG_LEVEL)
            ),
            log_format=environ.get(
                'NETSHARE_LOG_FORMAT',
                config_data.get('log_format', cls.DEFAULT_LOG_FORMAT)
            ),
            log_json=parse_bool(environ.get(
                'NETSHARE_LOG_JSON',
                config_data.get('log_json', cls.DEFAULT_LOG_JSON)
            ))
        )

        logger.debug(f"ROOT: {config.root}")
        logger.debug(f"META_DIR: {config.meta_dir}")
        return config

    @classmethod
    def _load_ini_file(cls, config_file: str) -> Dict[str, Any]:
        """
        Load configuration from INI file.

        Expected format:
        [netshare]
        root = /var/lib/docker-volumes/netshare
        meta_dir = .meta
        log_level = INFO
        log_json = false
        """
        config_data = {}

        if not os.path.exists(config_file):
            logger.debug(f"Config file not found: {config_file}, using defaults")
            return config_data

        parser = ConfigParser(interpolation=None)
        try:
            parser.read(config_file)
        except ConfigParserError as e:
            raise ConfigurationException(f"Failed to parse config file {config_file}: {e}") from e

        # [netshare] wins over [DEFAULT]
        for section in ['netshare', 'DEFAULT']:
            if parser.has_section(section) or section == 'DEFAULT':
                for key, value in parser.items(section):
                    if key not in config_data:
                        config_data[key] = value

        logger.info(f"Loaded {len(config_data)} config parameters from {config_file}")
        return config_data

    def validate(self):
        """
        Validate configuration.

        Raises:
            ConfigurationException if configuration is invalid
        """
        if not self.root or not os.path.isabs(self.root):
            raise ConfigurationException(f"root must be an absolute path: {self.root!r}")

        if not validate_meta_dir(self.meta_dir):
            raise ConfigurationException(f"meta_dir must be a single path segment: {self.meta_dir!r}")

        if not validate_log_level(self.log_level):
            raise ConfigurationException(f"Invalid log level: {self.log_level!r}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            'root': self.root,
            'meta_dir': self.meta_dir,
            'log_level': self.log_level,
            'log_format': self.log_format,
            'log_json': self.log_json
        }
