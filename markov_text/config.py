import logging
import os

# --- Table Format ---
# Fills the prefix window before any real token has been read. Older table
# files were written with this exact value, so it must not change.
SENTINEL_TOKEN = '""'

# --- File I/O ---
# surrogateescape lets undecodable bytes pass through a build/load round trip.
FILE_ENCODING = os.environ.get('MARKOV_TEXT_ENCODING', 'utf-8')
FILE_ERRORS = 'surrogateescape'

# --- Logging ---
LOG_LEVEL = os.environ.get('MARKOV_TEXT_LOG_LEVEL', 'WARNING').upper()
if not isinstance(logging.getLevelName(LOG_LEVEL), int):
    LOG_LEVEL = 'WARNING'
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

# --- Generation ---
# Seed used by `generate` when --seed is not given. Unset means a fresh seed per run.
_seed = os.environ.get('MARKOV_TEXT_SEED')
try:
    DEFAULT_SEED = int(_seed) if _seed else None
except ValueError:
    logging.getLogger(__name__).warning(
        f"Ignoring MARKOV_TEXT_SEED={_seed!r}: not an integer."
    )
    DEFAULT_SEED = None
