"""Server-wide constants."""

PROJECT_NAME = "Customer Data Service"
API_V1_STR = "/api/v1"
SCHEMA_VERSION = "v1"
