"""Stores useful constants."""

__version__ = "1.0.0"

BASE_URL = "https://api.jotform.com"
BASE_URL_EU = "https://eu-api.jotform.com"
BASE_URL_HIPAA = "https://hipaa-api.jotform.com"
API_VERSION = "v1"

# Environment variables read by JotformClient.from_env()
ENV_API_KEY = "JOTFORM_API_KEY"
ENV_BASE_URL = "JOTFORM_BASE_URL"
ENV_API_VERSION = "JOTFORM_API_VERSION"
