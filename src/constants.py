"""Application constants - centralized configuration values."""

from pathlib import Path

# =============================================================================
# Paths
# =============================================================================
PROJECT_ROOT = Path(__file__).resolve().parent.parent
TEMPLATES_DIR = PROJECT_ROOT / "templates"

# =============================================================================
# Session & Security
# =============================================================================
SESSION_TIMEOUT_DAYS = 7
SESSION_COOKIE_NAME = "github_login_session"
SESSION_USER_KEY = "user_id"

# =============================================================================
# OAuth
# =============================================================================
GITHUB_PROVIDER = "github"
GITHUB_AUTHORIZE_URL = "https://github.com/login/oauth/authorize"
GITHUB_TOKEN_URL = "https://github.com/login/oauth/access_token"
GITHUB_API_BASE_URL = "https://api.github.com/"
GITHUB_SCOPE = "user:email"

# Failure codes passed to /auth/failure
FAILURE_INVALID_CREDENTIALS = "invalid_credentials"
FAILURE_INVALID_USER = "invalid_user"

# =============================================================================
# API Timeouts (in seconds)
# =============================================================================
HTTPX_TIMEOUT = 10.0
