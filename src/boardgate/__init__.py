"""boardgate: request validation and comment-policy authorization for task boards."""

__version__ = "0.3.0"
