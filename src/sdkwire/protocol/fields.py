"""Binding vocabulary constants.

Keep these in one place to avoid stringly-typed binding declarations.
"""

# Wire locations.

PATH = "PATH"
QUERY = "QUERY"
HEADER = "HEADER"
PAYLOAD_ROOT = "PAYLOAD_ROOT"
PAYLOAD_FIELD = "PAYLOAD_FIELD"

locations = frozenset((PATH, QUERY, HEADER, PAYLOAD_ROOT, PAYLOAD_FIELD))
payload_locations = frozenset((PAYLOAD_ROOT, PAYLOAD_FIELD))

# Locations that can only hold a value rendered as a single string.
flat_locations = frozenset((PATH, QUERY, HEADER))

# Flat locations where a list is joined into one comma-separated value.
joined_locations = frozenset((PATH, HEADER))

# Value kinds.

SCALAR = "SCALAR"
STRUCTURED = "STRUCTURED"
LIST = "LIST"
MAP = "MAP"

kinds = frozenset((SCALAR, STRUCTURED, LIST, MAP))
collection_kinds = frozenset((LIST, MAP))
member_kinds = frozenset((SCALAR, STRUCTURED))

# Fixed wire format for timestamps: ISO 8601, UTC, millisecond precision.
# The milliseconds and the trailing Z are appended to this format.

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S"
