"""Global constants for lambda-deploy"""

import re

APP_NAME = "lambda-deploy"
LOG_FORMAT = "%(message)s"

# Version related
CONFIG_VERSION = "1.0"

# Project identification
PROJECT_CONFIG_FILE = ".lambda-deploy.yaml"
PROJECT_MARKERS = [
    PROJECT_CONFIG_FILE,
    "lambdas",
]

# Directory structure
DEFAULT_LAMBDAS_DIR = "lambdas"
DEFAULT_SHARED_DIR = "shared"
DEFAULT_TEMP_DIR = "temp_packages"
DEFAULT_REQUIREMENTS_FILE = "requirements.txt"
MERGED_REQUIREMENTS_SUFFIX = ".requirements.txt"

# Contract bundle layout
DEFAULT_CONTRACTS_DIR = "contracts/rfp-contracts"
DEFAULT_OPENAPI_SPEC = "openapi/api-gateway.yaml"
DEFAULT_EVENTS_DIR = "events"
DEFAULT_EVENTS_SCHEMA = "workflow-event.schema.json"
SCHEMA_FILE_SUFFIX = ".schema.json"

# Deployment defaults
DEFAULT_ENVIRONMENT = "dev"
DEFAULT_REGION = "us-east-1"

DEFAULT_UNITS = [
    "sam-gov-daily-download",
    "sam-json-processor",
    "sam-sqs-generate-match-reports",
    "sam-daily-email-notification",
    "sam-email-notification",
    "sam-merge-and-archive-result-logs",
    "sam-produce-user-report",
    "sam-produce-web-reports",
]

# Archive settings
ARCHIVE_EXTENSION = ".zip"
ARCHIVE_EXCLUDE_PATTERNS = [
    "*.pyc",
    "__pycache__",
    ".git*",
    ".DS_Store",
]
# Earliest timestamp a zip entry can carry
ARCHIVE_FIXED_DATE_TIME = (1980, 1, 1, 0, 0, 0)
ARCHIVE_FILE_MODE = 0o644
ARCHIVE_EXEC_MODE = 0o755

# Remediation hints
HINT_CREATE_FUNCTION = (
    "Run 'aws lambda create-function' first or use infrastructure deployment"
)
HINT_SUBMODULE_INIT = "Run: git submodule update --init --recursive"


# Error codes
class ErrorCode:
    CONFIG_FORMAT_ERROR = "LD001"
    PROJECT_NOT_FOUND = "LD002"
    PREREQUISITE_FAILED = "LD003"
    SOURCE_NOT_FOUND = "LD004"
    PACKAGE_FAILED = "LD005"
    DEPENDENCY_INSTALL_FAILED = "LD006"
    REMOTE_CALL_FAILED = "LD007"


# Environment variables
ENV_PROJECT_ROOT = "PROJECT_ROOT"
ENV_REGION_VARS = ["AWS_REGION", "REGION"]

# Validation patterns
UNIT_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9][a-zA-Z0-9_-]*$")

# Display constants
EMOJI_SUCCESS = "✅"
EMOJI_ERROR = "❌"
EMOJI_WARNING = "⚠️"
EMOJI_SEARCH = "🔍"
EMOJI_PARTY = "🎉"

# Message templates
MSG_DEPLOY_SUCCESS = f"{EMOJI_SUCCESS} Deployed: {{unit}}"
MSG_DEPLOY_FAILED = f"{EMOJI_ERROR} Failed to deploy: {{unit}} (function may not exist)"
MSG_SOURCE_NOT_FOUND = "Source directory not found: {path}"
MSG_CONTRACTS_NOT_FOUND = f"Contracts not found. {HINT_SUBMODULE_INIT}"

PACKAGE_STEPS = [
    "Copying function code...",
    "Copying shared libraries...",
    "Installing dependencies...",
    "Creating deployment package...",
    "Deploying to AWS Lambda...",
]
