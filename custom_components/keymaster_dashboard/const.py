DOMAIN = "keymaster_dashboard"

# Strategy registration
STRATEGY_KEY = "keymaster"
STRATEGY_TYPE = f"custom:{STRATEGY_KEY}"
DATA_STRATEGIES = "strategies"

# Discovery
SLOT_NAME_DOMAIN = "input_text."
SLOT_NAME_MARKER = "_name_"
NAME_TOKEN = "name"

# View layout
VIEW_PATH_PREFIX = "keypad-"
VIEW_ICON = "mdi:lock-smart"
VIEW_TITLE_SUFFIX = "Codes and Configuration"
ACCESS_COUNT_ICON = "mdi:key-variant"
ACCESS_COUNT_SPEED = 250

ADVANCED_OPTIONS_LABEL = "Advanced Options"
CUSTOM_WEEKDAYS_LABEL = "Custom Weekdays"

WEEKDAYS = ("sun", "mon", "tue", "wed", "thu", "fri", "sat")

# Card types understood by the renderer
CARD_VERTICAL_STACK = "vertical-stack"
CARD_MARKDOWN = "markdown"
CARD_ENTITIES = "entities"
CARD_FOLD_ENTITY_ROW = "custom:fold-entity-row"
CARD_NUMBERBOX = "custom:numberbox-card"
ROW_DIVIDER = "divider"
ROW_SECTION = "section"

# Per-slot entity templates, interpolated with {lock} and {slot}
SLOT_NAME = "input_text.{lock}_name_{slot}"
SLOT_PIN = "input_text.{lock}_pin_{slot}"
SLOT_ENABLED = "input_boolean.enabled_{lock}_{slot}"
SLOT_NOTIFY = "input_boolean.notify_{lock}_{slot}"
SLOT_CONNECTED = "sensor.connected_{lock}_{slot}"
SLOT_ACTIVE = "binary_sensor.active_{lock}_{slot}"
SLOT_RESET = "input_boolean.reset_codeslot_{lock}_{slot}"
SLOT_ACCESS_LIMIT = "input_boolean.accesslimit_{lock}_{slot}"
SLOT_ACCESS_COUNT = "input_number.accesscount_{lock}_{slot}"
SLOT_DATE_RANGE = "input_boolean.daterange_{lock}_{slot}"
SLOT_START_DATE = "input_datetime.start_date_{lock}_{slot}"
SLOT_END_DATE = "input_datetime.end_date_{lock}_{slot}"

WEEKDAY_TEMPLATES = (
    "input_boolean.{day}_{lock}_{slot}",
    "input_boolean.{day}_inc_{lock}_{slot}",
    "input_datetime.{day}_start_date_{lock}_{slot}",
    "input_datetime.{day}_end_date_{lock}_{slot}",
)

# Per-lock badges, in display order
BADGE_TEMPLATES = (
    "input_text.{lock}_lockname",
    "input_boolean.{lock}_lock_notifications",
    "input_boolean.{lock}_dooraccess_notifications",
    "input_boolean.{lock}_garageacess_notifications",
    "lock.{lock}",
    "binary_sensor.{lock}_door",
    "input_text.keymaster_{lock}_autolock_door_time_day",
    "input_text.keymaster_{lock}_autolock_door_time_night",
    "input_boolean.keymaster_{lock}_autolock",
    "timer.keymaster_{lock}_autolock",
)

# Shown when no locks are discovered
NO_LOCKS_TITLE = "No Locks Found"
NO_LOCKS_PATH = "no-locks"
NO_LOCKS_CONTENT = (
    "## No Keymaster Locks Configured\n\n"
    "Please configure your keymaster locks through the integration settings first."
)

# WebSocket command types
WS_NS = DOMAIN
WS_GENERATE = f"{WS_NS}/generate"
