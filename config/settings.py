"""Application settings read from the environment (and an optional .env file)."""
import os

from dotenv import load_dotenv

# Existing environment variables win over .env so tests can set them first
load_dotenv(".env", override=False)

DATABASE_URL = os.getenv('DATABASE_URL', 'sqlite:///./categories.db')
DB_ECHO = os.getenv('DB_ECHO', 'false').lower() == 'true'
DB_POOL_SIZE = int(os.getenv('DB_POOL_SIZE', '10'))
DB_MAX_OVERFLOW = int(os.getenv('DB_MAX_OVERFLOW', '20'))

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
LOG_DIR = os.getenv('LOG_DIR', 'logs')

APP_TITLE = os.getenv('APP_TITLE', 'Expense Tracker - Categories')
API_HOST = os.getenv('API_HOST', '0.0.0.0')
API_PORT = int(os.getenv('API_PORT', '8000'))
RELOAD = os.getenv('RELOAD', 'false').lower() == 'true'

# Toast notifications on the management screen
TOAST_DURATION_MS = int(os.getenv('TOAST_DURATION_MS', '3000'))
