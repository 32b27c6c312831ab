# Validation (1000-1999)
MALFORMED_PAYLOAD = 1001
AMBIGUOUS_VARIANT = 1002
REQUEST_REJECTED = 1003

# Not Found (2000-2999)
RESOURCE_NOT_FOUND = 2001

# Authorization (3000-3999)
BOT_FORBIDDEN = 3001

# Authentication (4000-4999)
BOT_TOKEN_REJECTED = 4001

# External Service (5000-5999)
TELEGRAM_UNREACHABLE = 5001
TELEGRAM_API_FAILURE = 5002
TELEGRAM_RESPONSE_UNREADABLE = 5003

# Rate Limit (6000-6999)
TELEGRAM_RATE_LIMITED = 6001

# Configuration (7000-7999)
BOT_TOKEN_MISSING = 7001

# Internal (8000-8999)
PAYLOAD_ENCODING_FAILED = 8001
