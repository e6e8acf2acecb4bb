"""Constants shared by the multikey codec."""

MULTIBASE_PREFIX = "z"
MULTIBASE_NAME = "base58btc"

UNKNOWN_KEY_TYPE = "unknown"
