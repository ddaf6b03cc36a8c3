"""Configuration constants for the am-i-home HomeStation client."""

DEFAULT_ROUTER = "http://192.168.0.1"
DEFAULT_USER = "admin"
# The password can also be supplied via this env var or a local .env file
PASSWORD_ENV_VAR = "AM_I_HOME_ROUTER_PASS"
DOTENV_FILE = ".env"

LOGIN_URL   = "/api/v1/session/login"
MENU_URL    = "/api/v1/session/menu"     # visited once after login to unlock the API
LOGOUT_URL  = "/api/v1/session/logout"
HOST_TBL_URL = "/api/v1/host/hostTbl"

REQUEST_TIMEOUT = 10    # seconds per HTTP request, body included
BODY_CHUNK_SIZE = 8192

USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded; charset=UTF-8"

# Sent as the password to make the router answer with a salt pair
SEEK_SALT_PASSWORD = "seeksalthash"
# Router message code: another session is open and must be logged out first
LOGIN_BLOCKED_CODE = "MSG_LOGIN_150"
STATUS_OK = "ok"

# Must match the router's login.js, otherwise the server rejects the hash
PBKDF2_ITERATIONS = 1000
PBKDF2_KEY_BYTES  = 16
