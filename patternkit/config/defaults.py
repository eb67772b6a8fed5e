# patternkit/config/defaults.py
from typing import Any, Dict, Tuple

DEFAULT_CONFIG: Dict[str, Any] = {
    "version": "1.0.0",
    "environment": "development",

    # Logging configuration
    "logging": {
        "level": "WARNING",
        "destination": "console",
        "file": {
            "path": "logs/patternkit.log",
            "max_size_mb": 10,
            "backup_count": 5,
        },
    },

    # CLI output
    "output": {
        "format": "table",
    },

    # Demonstration tunables
    "demos": {
        "flyweight_tree_count": 1_000_000,
    },
}

# Environment variable -> path into the configuration dictionary
ENV_OVERRIDES: Dict[str, Tuple[str, ...]] = {
    "PATTERNKIT_LOG_LEVEL": ("logging", "level"),
    "PATTERNKIT_LOG_DESTINATION": ("logging", "destination"),
    "PATTERNKIT_LOG_FILE": ("logging", "file", "path"),
    "PATTERNKIT_OUTPUT_FORMAT": ("output", "format"),
    "PATTERNKIT_ENVIRONMENT": ("environment",),
}
