"""Centralized configuration for the word engine: dictionary location, caching and search limits."""

import os

# ============================================================================
# PATH SETTINGS
# ============================================================================
DATA_DIR = os.environ.get("WORD_ENGINE_DATA_DIR", "assets/data")
DICTIONARY_PATH = os.environ.get("DICTIONARY_PATH", os.path.join(DATA_DIR, "words.txt"))

# ============================================================================
# DICTIONARY SETTINGS
# ============================================================================
MIN_WORD_LENGTH = 1
MAX_WORD_LENGTH = 14  # Matches the puzzle length
DICTIONARY_CACHE_TTL_S = int(os.environ.get("DICTIONARY_CACHE_TTL_S", "86400"))  # 24 hours

# ============================================================================
# SEARCH LIMITS
# ============================================================================
DEFAULT_MAX_WORDS = 1000000
CANDIDATE_OVERSCAN = 3  # Candidates scanned per requested word
DEFAULT_MAX_COMBINATIONS = 20
COMBINATION_POOL_SIZE = 100  # Top ranked words fed into the backtracking search
DEFAULT_SAMPLE_SIZE = 10
