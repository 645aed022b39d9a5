"""Constants and configuration defaults for kubesim.

Constants are organised by category:

* Environment: variable names read at startup
* Logging: default log level and plain-handler format
* Rendering: table padding and placeholder literals
* Generation: pools and ranges used by the random cluster generator
"""

from __future__ import annotations

# Environment
ENV_LOG_LEVEL = "KUBESIM_LOG_LEVEL"
ENV_SEED = "KUBESIM_SEED"

# Logging
DEFAULT_LOG_LEVEL = "WARNING"
PLAIN_LOG_FORMAT = "[%(asctime)s] %(levelname)s %(message)s"

# Rendering
TABLE_PADDING = 2
NONE_PLACEHOLDER = "<none>"
MISSING_CELL = "-"
ERROR_MARKER = " ⚠"
TIMESTAMP_FORMAT = "%H:%M:%S"

# Generation
NAMESPACE_POOL: tuple[str, ...] = (
    "default",
    "kube-system",
    "production",
    "staging",
    "monitoring",
    "logging",
)

POD_NAME_POOL: tuple[str, ...] = (
    "web-server",
    "api-gateway",
    "auth-service",
    "database-proxy",
    "cache-service",
    "worker-pool",
    "scheduler",
    "notifier",
    "analytics",
    "frontend",
    "backend-api",
    "message-queue",
    "file-storage",
    "search-engine",
    "load-balancer",
)

DEPLOYMENT_NAME_POOL: tuple[str, ...] = (
    "web-deployment",
    "api-deployment",
    "auth-deployment",
    "worker-deployment",
    "frontend-deployment",
    "backend-deployment",
)

DAEMONSET_NAME_POOL: tuple[str, ...] = (
    "fluentd",
    "node-exporter",
    "log-collector",
    "network-proxy",
)

NODE_COUNT = 3
PODS_PER_NAMESPACE = (3, 8)
DEPLOYMENTS_PER_NAMESPACE = (1, 3)
POD_ERROR_PROBABILITY = 0.5
DAEMONSET_PROBABILITY = 0.4
MAX_AGE_DAYS = 30
