"""
Shared constants used across the terminal.

Field capacities include one slot for the terminator, so a field declared
with capacity N accepts at most N - 1 characters.
"""

# Field capacities
NAME_MAX_LENGTH = 51
EMAIL_MAX_LENGTH = 51
PHONE_MAX_LENGTH = 14
NATIONAL_ID_MAX_LENGTH = 12
ORG_ID_MAX_LENGTH = 13
DATE_MAX_LENGTH = 11
TIME_MAX_LENGTH = 6
ADDRESS_MAX_LENGTH = 101
NUMBER_MAX_LENGTH = 11

# Format lengths
PHONE_LENGTH = 13
NATIONAL_ID_LENGTH = 11
ORG_ID_MAX_DIGITS = 12
DATE_LENGTH = 10
TIME_LENGTH = 5

# Menu layout (inner widths exclude the "|" borders)
MENU_TITLE_PADDING = 2
MENU_OPTION_PADDING = 4
