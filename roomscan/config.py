"""Application configuration via environment variables."""

import os
from dotenv import load_dotenv

load_dotenv()

# Logging
LOG_LEVEL = os.getenv("ROOMSCAN_LOG_LEVEL", "WARNING").upper()

# Input artifacts
RAW_SCAN_FILENAME = os.getenv("ROOMSCAN_RAW_SCAN_FILENAME", "rawScan.json")
