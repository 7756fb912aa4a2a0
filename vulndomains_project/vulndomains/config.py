# vulndomains/config.py
import os

# Easily exploitable characters: each has a Cyrillic/Greek lookalike
ALPHABET = frozenset("aplecxsyjiho-")

# Public Suffix List source. Empty tuple = bundled tldextract snapshot, no network.
PSL_URLS = tuple(u.strip() for u in os.getenv("VULNDOMAINS_PSL_URL", "").split(",") if u.strip())
PSL_CACHE_DIR = os.getenv("VULNDOMAINS_PSL_CACHE") or None
INCLUDE_PRIVATE_SUFFIXES = os.getenv("VULNDOMAINS_PRIVATE_SUFFIXES", "true").lower() in ("1", "true", "yes")

# Input file settings
INPUT_ENCODING = "utf-8"
# Undecodable bytes become U+FFFD, which is never in ALPHABET
INPUT_ERRORS = "replace"
RECORD_PREFIX = "[ "
RECORD_SUFFIX = " ]"
RECORD_SEPARATOR = ", "

LOG_LEVEL = os.getenv("VULNDOMAINS_LOG_LEVEL", "WARNING").upper()
