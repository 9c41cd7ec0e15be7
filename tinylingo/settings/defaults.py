"""
Settings Defaults
=================
Default values for the TinyLingo configuration.
"""

# Local OpenAI-compatible server (LM Studio default port)
DEFAULT_ENDPOINT = "http://127.0.0.1:1234/v1/chat/completions"
DEFAULT_MODEL = "qwen3-0.6b"

DEFAULT_FUZZY_THRESHOLD = 0.2

# The smart call runs inside a prompt-submit hook, so it must stay short
DEFAULT_TIMEOUT_SECONDS = 3.0
DEFAULT_MAX_TOKENS = 64

# Environment overrides
ENV_HOME = "TINYLINGO_HOME"
ENV_API_KEY = "TINYLINGO_API_KEY"
ENV_DEBUG = "TINYLINGO_DEBUG"

CONFIG_DIR_NAME = "tinylingo"
CONFIG_FILE_NAME = "config.json"
GLOSSARY_FILE_NAME = "glossary.json"
LOG_FILE_NAME = "debug.log"
