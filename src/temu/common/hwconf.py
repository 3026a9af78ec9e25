REGISTER_COUNT   = 8
MEMORY_SIZE      = 16
BYTE_MASK        = 0xFF

LABEL_MARKER     = '.'

LOG_CAPACITY     = 16           # display log keeps this many most recent lines

RATE_MIN         = 1            # instructions per second
RATE_MAX         = 2000
DEFAULT_RATE     = RATE_MIN

FRAME_TIME       = 0.001        # host loop sleep between ticks, seconds
