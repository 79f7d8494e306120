"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

ORGANIZERS_PARTITION = "organizers"
EMPLOYEES_PARTITION = "hr_employees"
PASSPORT_BOXES_PARTITION = "passport_boxes"

LOCAL_ID_PREFIX = "local"
LOCAL_ID_RANDOM_LENGTH = 9

CSV_DELIMITER = ","
CSV_QUOTE = '"'
CSV_LINE_TERMINATOR = "\r\n"
# Separator for list fields typed as plain text (form posts, hand-written CSV).
LIST_TEXT_SEPARATOR = ";"

DEFAULT_STORE_BACKEND = "file"
DEFAULT_STORE_DIR = "instance/store"
