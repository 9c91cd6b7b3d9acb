"""
Constants
Centralised storage for persisted file names, template names and status labels.
"""
BUGS_FILE = "bugs.xml"
BACKUP_SUFFIX = ".old"
TEMP_FILE = "bugs.tmp"

TEMPLATE_EXTENSION = ".template"
ROOT_TEMPLATE = "root"
BUG_TEMPLATE = "bug"

# Status codes as stored in <status>; anything else renders as its number.
STATUS_NAMES = {
    0: "new",
    1: "open",
    2: "fixed",
    3: "closed",
}
