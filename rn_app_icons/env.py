"""
Environment Management Module for rn-app-icons

Uses python-dotenv for environment variable management.

Usage:
    from rn_app_icons.env import env

    print(env.default_output_dir)
    print(env.manifest_author)
    print(env.log_level)
"""

import os
from pathlib import Path
from dotenv import load_dotenv


# Global constants
APP_NAME = 'rn-app-icons'
APP_VERSION = '1.0.0'
ENV_PREFIX = 'RN_APP_ICONS_'

app_home = Path.home() / f'.{APP_NAME}'
env_file = Path(os.getenv(f'{ENV_PREFIX}ENV_FILE', str(app_home / '.env')))

# Load environment variables
if env_file.exists():
    load_dotenv(env_file)


class EnvConfig:
    """Environment configuration object"""

    @staticmethod
    def _get(name: str, default: str) -> str:
        return os.getenv(f'{ENV_PREFIX}{name}', default)

    @property
    def logs_dir(self) -> str:
        logs_dir = os.path.expanduser(self._get('PATHS_LOGS_DIR', str(app_home / 'logs')))
        if not os.path.isabs(logs_dir):
            logs_dir = str(app_home / logs_dir)
        return logs_dir

    @property
    def log_level(self) -> str:
        return self._get('LOGGING_CONSOLE_LEVEL', 'INFO')

    @property
    def log_file_enabled(self) -> bool:
        return self._get('LOGGING_FILE_ENABLED', 'false').lower() == 'true'

    @property
    def log_file_level(self) -> str:
        return self._get('LOGGING_FILE_LEVEL', 'DEBUG')

    @property
    def log_simple_format(self) -> bool:
        return self._get('LOGGING_CONSOLE_SIMPLE_FORMAT', 'true').lower() == 'true'

    @property
    def log_max_files(self) -> int:
        return int(self._get('LOGGING_MAX_FILES', '5'))

    @property
    def log_max_size(self) -> str:
        return self._get('LOGGING_MAX_SIZE', '10MB')

    @property
    def default_output_dir(self) -> str:
        return self._get('OUTPUT_DIR', './app-icons')

    @property
    def manifest_author(self) -> str:
        """Author tag written into the iOS Contents.json info block"""
        return self._get('MANIFEST_AUTHOR', APP_NAME)

    @property
    def parent_search_depth(self) -> int:
        """How many ancestor directories project detection may climb"""
        try:
            depth = int(self._get('PARENT_SEARCH_DEPTH', '3'))
        except ValueError:
            return 3
        return max(depth, 0)

    @property
    def version(self) -> str:
        return APP_VERSION


# Global env object
env = EnvConfig()
