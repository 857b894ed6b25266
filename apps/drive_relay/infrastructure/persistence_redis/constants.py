"""Redis key prefixes."""

SESSION_KEY_PREFIX = "drive_relay:oauth:session:"
RESULT_KEY_PREFIX = "drive_relay:oauth:result:"
