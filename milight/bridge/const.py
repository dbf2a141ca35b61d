DEFAULT_PORT = 8899

# Every datagram ends with this byte, the bridge firmware ignores anything else.
COMMAND_SUFFIX = 0x55
COMMAND_LENGTH = 3

# The bridge drops commands that arrive faster than this (seconds).
PACING_DELAY = 0.1

BROADCAST_SUFFIX = "255"

MIN_BYTE = 0x00
MAX_BYTE = 0xFF

MIN_BRIGHTNESS = 0
MAX_BRIGHTNESS = 25
BRIGHTNESS_OFFSET = 2

ALL_ZONES = 0
ZONES = (1, 2, 3, 4)
