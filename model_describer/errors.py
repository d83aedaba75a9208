"""Error types for model-describer."""

from typing import Optional, Dict, Any


class ModelDescriberError(Exception):
    """Base exception for model-describer errors."""

    def __init__(self, message: str, code: str = "MODEL_DESCRIBER_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ClassNotFoundError(ModelDescriberError):
    """Raised when a class name cannot be loaded as a describable model."""

    def __init__(self, class_name: str, reason: Optional[str] = None):
        details = {"class_name": class_name}
        if reason:
            details["reason"] = reason
        super().__init__(f"Class {class_name} not found!", code="CLASS_NOT_FOUND", details=details)
        self.class_name = class_name
