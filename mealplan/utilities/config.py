"""Configuration management for the weekly menu service."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

from mealplan.utilities.constants import PREFERRED_SHEET_NAME

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Upload auth
ADMIN_TOKEN: Final[str] = os.getenv('ADMIN_TOKEN', '')

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# Upload limits
MAX_UPLOAD_BYTES: Final[int] = int(os.getenv('MAX_UPLOAD_BYTES', str(10 * 1024 * 1024)))

# Parser
PREFERRED_SHEET: Final[str] = os.getenv('PREFERRED_SHEET', PREFERRED_SHEET_NAME)

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('MEALPLAN_DATA_DIR', str(BASE_DIR / 'data'))).resolve()
