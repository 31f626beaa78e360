"""Configuration module for the token top-up report application."""
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Application settings
DEBUG = os.environ.get("DEBUG", "False").lower() in ["true", "1", "yes"]

# Folder paths
LOGS_FOLDER = os.environ.get("LOGS_FOLDER", "logs")

# Report output
OUTPUT_FILE = os.environ.get("OUTPUT_FILE", "./output.txt")
REPORT_ENCODING = "utf-8"

# Log rotation (bytes, backup count)
APP_LOG_MAX_BYTES = 5 * 1024 * 1024
APP_LOG_BACKUPS = 5
ERROR_LOG_MAX_BYTES = 2 * 1024 * 1024
ERROR_LOG_BACKUPS = 10
DEBUG_LOG_MAX_BYTES = 10 * 1024 * 1024
DEBUG_LOG_BACKUPS = 3
