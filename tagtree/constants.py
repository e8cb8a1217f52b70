# Tag of the synthetic element that owns every top-level node of a parse.
ROOT_TAG = "root"

# Maximum number of simultaneously open elements before parsing gives up.
DEFAULT_MAX_DEPTH = 512

INDENT = "  "
