"""Vocabularies the generator draws from."""

USER_POOL = [
    "user-1001", "user-1002", "user-1017", "user-2040",
    "user-3315", "user-4821", "user-5150", "user-7733",
]

ENDPOINT_POOL = [
    "/api/users", "/api/orders", "/api/products", "/api/payments",
    "/api/search", "/api/cart", "/api/login", "/api/health",
]

REGION_POOL = ["us-east-1", "us-west-2", "eu-west-1", "ap-southeast-1"]

COMPONENT_POOL = [
    "database", "cache", "message-queue", "auth-provider", "object-storage",
]

SUCCESS_STATUSES = [200, 200, 200, 201, 204]
CLIENT_ERROR_STATUSES = [400, 401, 403, 404, 429]
SERVER_ERROR_STATUSES = [500, 502, 503, 504]

# Response time ranges in ms, by outcome
RESPONSE_TIME_RANGES = {
    "INFO": (5, 300),
    "WARN": (300, 2000),
    "ERROR": (1000, 10000),
}

REQUEST_MESSAGES = {
    "INFO": [
        "Request completed successfully",
        "User logged in",
        "Order placed successfully",
        "Search query executed",
        "Payment processed",
    ],
    "WARN": [
        "Slow response detected",
        "Rate limit approaching threshold",
        "Request rejected by validation",
        "Retrying upstream call",
    ],
    "ERROR": [
        "Database connection failed",
        "Upstream service unavailable",
        "Unhandled exception in request handler",
        "Payment gateway timeout",
    ],
}

HEALTH_MESSAGES = {
    "INFO": "Component health check passed",
    "WARN": "Component health degraded",
    "ERROR": "Component health check failed",
}

DEBUG_MESSAGES = [
    "Processing request",
    "Cache lookup completed",
    "Parsed request body",
    "Token validation started",
    "Connection acquired from pool",
]

# The three records the generator writes every tick in fixed mode
FIXED_RECORDS = [
    ("INFO", "User logged in"),
    ("ERROR", "Database connection failed"),
    ("DEBUG", "Processing request"),
]
