# Defaults for the batch conversion. Every path here can be overridden from the
# command line.

DEFAULT_INPUT_DIR = 'geocoding'
DEFAULT_OUTPUT_DIR = 'generated'

# Name of the language availability index written next to the area code maps
CONFIG_FILE_NAME = 'config'

# Input files are named <calling code><suffix> inside one directory per language
TEXT_FILE_SUFFIX = '.txt'

# Separates the numeric prefix from the language tag in an output file name,
# e.g. 1201_en or 86_zh_Hans
FILE_NAME_SEPARATOR = '_'

# The North American Numbering Plan shares calling code 1 across many area
# codes, so its tables are split into one output file per 1 + NPA prefix
NANPA_COUNTRY_CODE = 1
NANPA_PREFIX_LENGTH = 4

# Prefixes are stored as signed 32-bit integers by the lookup service
MAX_PREFIX = 2**31 - 1
