# /gradebook/core/config.py

import os

from dotenv import load_dotenv

# Values in a local .env file are added to the environment; real environment
# variables take precedence.
load_dotenv()

# --- Persistence ---
# The database URL used when the SQL store is selected.
# The default is a local SQLite file for development.
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./gradebook.db")

# Determine which data source to use based on an environment variable.
# When false, the snapshot lives in three JSON files under GRADEBOOK_DATA_DIR.
USE_SQL_STORE = os.getenv("USE_SQL_STORE", "false").lower() == "true"
GRADEBOOK_DATA_DIR = os.getenv("GRADEBOOK_DATA_DIR", "gradebook/data")

# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "text")

# --- Academic calendar ---
# Academic years are written in the Buddhist Era.
ACADEMIC_YEAR_OFFSET = 543
ACADEMIC_YEAR_CHOICES = int(os.getenv("ACADEMIC_YEAR_CHOICES", "5"))
