PROJECT_NAME = "Seyali API"
API_VERSION = "1.0.0"
API_PREFIX = "/api"

GREETING_MESSAGE = "Welcome to Seyali API!"

NOT_FOUND_MESSAGE = "Not found"
SERVER_ERROR_MESSAGE = "Something went wrong!"
RATE_LIMITED_MESSAGE = "Too many requests, please try again later."
