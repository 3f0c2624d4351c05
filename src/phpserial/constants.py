"""Constants for the PHP serialize() wire format."""

# Type tags
NULL_TAG = "n"
BOOL_TAG = "b"
INT_TAG = "i"
FLOAT_TAG = "d"
STRING_TAG = "s"
ARRAY_TAG = "a"
OBJECT_TAG = "o"

# Punctuation
TAG_SEPARATOR = ":"
TERMINATOR = ";"
QUOTE = '"'
OPEN_BRACE = "{"
CLOSE_BRACE = "}"

NULL_LITERAL = "N;"

# Special float literals
NAN_LITERAL = "NAN"
INF_LITERAL = "INF"
NEG_INF_LITERAL = "-INF"

# Signed 32-bit range used to decide between i: and d:
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

# Marker PHP prepends to protected property names
PROTECTED_MARKER = "\0*\0"

# Session store
SESSION_DELIMITER = "|"

# Decoder defaults
DEFAULT_STRICT = True
# None: no limit beyond the interpreter stack
DEFAULT_MAX_DEPTH = None
