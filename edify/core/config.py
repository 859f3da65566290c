# edify settings, read once at import from the environment (plus a local .env file)
# wire caps, prompt truncation sizes, timeouts and credential key names live here

import os
from dotenv import load_dotenv

load_dotenv()

# Provider
DEFAULT_PROVIDER = os.getenv("EDIFY_PROVIDER", "openai")
ANTHROPIC_VERSION = os.getenv("ANTHROPIC_VERSION", "2023-06-01")

# Generation caps (sent to the vendor as-is)
MAX_TOKENS = int(os.getenv("MAX_TOKENS", "1000"))
TEMPERATURE = float(os.getenv("TEMPERATURE", "0.7"))

# how much of the source content goes into prompts
GROUNDING_CHARS = int(os.getenv("GROUNDING_CHARS", "1000"))
SOURCE_CHARS = int(os.getenv("SOURCE_CHARS", "3000"))

# artifact sizes requested from the model
FLASHCARD_COUNT = int(os.getenv("FLASHCARD_COUNT", "6"))
QUIZ_COUNT = int(os.getenv("QUIZ_COUNT", "4"))

# HTTP
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "60"))
CONNECT_TIMEOUT = float(os.getenv("CONNECT_TIMEOUT", "10"))

# Credentials
CREDENTIALS_FILE = os.getenv("CREDENTIALS_FILE", ".env")
API_KEY_NAME = "edify_api_key"
PROVIDER_KEY_NAME = "edify_provider"
