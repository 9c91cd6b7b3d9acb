"""
Configuration
=============
Loads environment variables from .env file using python-dotenv.

Environment Variables:
    BUGS_FILE           — Path of the persisted document (default: bugs.xml)
    BUGS_BACKUP_SUFFIX  — Suffix of the rotated backup (default: .old)
    BUGS_TEMP_FILE      — Name of the temp file written during save, placed
                          next to BUGS_FILE (default: bugs.tmp)
    TEMPLATE_DIR        — Directory holding <name>.template files (default: tmpl/)
    STATIC_DIR          — Directory served under /static/ (default: ./static
                          in the working directory)
    HOST / PORT         — Listen address (default: 0.0.0.0:8080)
    LOG_LEVEL           — Root log level name (default: INFO)
    LOG_DIR             — Directory for the daily log file (default: logs)

Relative paths are resolved against the process working directory, except
the template and static defaults which live next to this project.
"""
import os
from dotenv import load_dotenv

from app.core.constants import BACKUP_SUFFIX, BUGS_FILE as _DEFAULT_BUGS_FILE, TEMP_FILE

load_dotenv()

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

BUGS_FILE = os.getenv("BUGS_FILE", _DEFAULT_BUGS_FILE)
BUGS_BACKUP_SUFFIX = os.getenv("BUGS_BACKUP_SUFFIX", BACKUP_SUFFIX)
BUGS_TEMP_FILE = os.getenv("BUGS_TEMP_FILE", TEMP_FILE)

TEMPLATE_DIR = os.getenv("TEMPLATE_DIR", os.path.join(PROJECT_ROOT, "tmpl"))
STATIC_DIR = os.getenv("STATIC_DIR", os.path.join(os.getcwd(), "static"))

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8080))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_DIR = os.getenv("LOG_DIR", "logs")
