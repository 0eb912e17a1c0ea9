"""UI configuration constants.

Centralizes labels and limits used by the UI module.
"""

from enum import IntEnum


class LogLevel(IntEnum):
    """Trace log thresholds. A panel shows entries at or above its level."""

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """Parse a level name case-insensitively. Unknown names mean DEBUG."""
        return cls.__members__.get(level_str.upper(), cls.DEBUG)


# Trace log colours
LOG_LEVEL_STYLES = {
    LogLevel.DEBUG: "dim white",
    LogLevel.INFO: "cyan",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "red",
}
LOG_COMPONENT_STYLES = {
    "TUI": "cyan",
    "Chat": "bright_magenta",
}

# Input history configuration
INPUT_HISTORY_MAX_SIZE = 100  # Maximum entries in composer history

# Log panel configuration
LOG_TIMESTAMP_FORMAT = "%H:%M:%S"
LOG_MAX_MESSAGE_LENGTH = 500  # Characters before truncating log messages

# Chat display configuration
MESSAGE_TIMESTAMP_FORMAT = "%H:%M:%S"
COMPOSER_PLACEHOLDER = "Type your AWS question…"

# Status texts keyed by ChatSession.status
STATUS_TEXT = {
    "busy": "Assistant is typing…",
    "ok": "Ready",
    "bad": "Reconnect and try again",
}

# One-click prompts in the side panel
SUGGESTED_PROMPTS = (
    "Explain Amazon S3 like I'm new to AWS",
    "What’s the difference between IAM Role and IAM User?",
    "Design a highly available 2-tier web app on AWS",
    "VPC vs Subnet vs Route Table — quick explanation",
    "What is CloudFront and when should I use it?",
    "RDS Multi-AZ vs Read Replica — when to use each?",
)

# Buttons in the empty conversation: (widget id, label, question)
QUICK_ASKS = (
    ("ask-s3", "Ask about S3", "What is Amazon S3?"),
    ("ask-iam", "Ask about IAM", "Explain IAM roles with an example"),
)
