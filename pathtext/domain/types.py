"""Domain character constants."""

SEP = "/"
BACKSLASH = "\\"
SEPARATORS = (SEP, BACKSLASH)
DOT = "."
DRIVE_MARK = ":"

# Labels returned by entry_name() for roots
UNIX_ROOT_LABEL = "Root"
DRIVE_LABEL_PREFIX = "Drive"
