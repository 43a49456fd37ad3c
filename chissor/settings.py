"""
Settings and configuration for Chissor.

Every value can be overridden from the environment before import.
"""

import os
from pathlib import Path

# Data directory paths
PACKAGE_DIR = Path(__file__).parent
DATA_DIR = Path(os.environ.get("CHISSOR_DATA_DIR", PACKAGE_DIR / "data"))

# Optional built-in dictionaries (jieba's extra_dict files, user must download these)
SMALL_DICT_PATH = Path(os.environ.get("CHISSOR_SMALL_DICT", DATA_DIR / "dict.txt.small"))
BIG_DICT_PATH = Path(os.environ.get("CHISSOR_BIG_DICT", DATA_DIR / "dict.txt.big"))

# Download URLs for the optional dictionaries
SMALL_DICT_URL = "https://raw.githubusercontent.com/fxsjy/jieba/master/extra_dict/dict.txt.small"
BIG_DICT_URL = "https://raw.githubusercontent.com/fxsjy/jieba/master/extra_dict/dict.txt.big"

# Frequency given to vocabulary entries without one when building a new dictionary
DEFAULT_WORD_FREQ = 5

# Result joining
NEWLINE = "\n"
DEFAULT_SEPARATOR = ""

# Hidden Markov model fallback for out-of-vocabulary text
DEFAULT_USE_HMM = True

# Display language for dictionary labels
AVAILABLE_LOCALES = ("en", "zh-CN", "zh-HK")
DEFAULT_LOCALE = os.environ.get("CHISSOR_LOCALE", "en")

# Debug mode
DEBUG = os.environ.get("CHISSOR_DEBUG", "").lower() in ("1", "true", "yes")

LOG_LEVEL = os.environ.get("CHISSOR_LOG_LEVEL", "DEBUG" if DEBUG else "WARNING").upper()
