"""
Constants used internally by the image grid tool.

These are implementation-level values that should not be overridden
via config files or CLI arguments.
"""

# Sample depth of the in-memory canvas
CHANNELS = 4
SAMPLE_MAX_16 = 65535
# 8-bit to 16-bit sample scale (0xff * 0x101 == 0xffff)
SAMPLE_SCALE_8_TO_16 = 257

# Pillow modes
COLOR_MODE_RGBA = "RGBA"
# Greyscale modes that carry more than 8 bits per sample
WIDE_GREY_MODES = ("I", "I;16", "I;16L", "I;16B", "I;16N")

# Output encoding
OUTPUT_FORMAT = "PNG"
OUTPUT_SUFFIX = ".png"
BIT_DEPTH_8 = 8
BIT_DEPTH_16 = 16

# Output file naming
OUTPUT_NAME_PREFIX = "imagegrid-image"
OUTPUT_DATE_FORMAT = "%Y-%m-%d"

# Percentages are expressed out of this value
PERCENT = 100
