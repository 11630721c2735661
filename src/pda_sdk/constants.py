# Number of bytes in an address key
PUBLIC_KEY_LEN = 32

# Maximum string length of a base58 encoded address key
PUBLIC_KEY_MAX_BASE58_LEN = 44

MAX_SEEDS = 16

MAX_SEED_LEN = 32

MAX_BUMP_SEED = 255

# Hashed last, with no terminator byte
PDA_MARKER = b'ProgramDerivedAddress'

BASE58_ALPHABET = '123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz'
