"""
Filesystem Exceptions

Exceptions raised by the session state and the configuration loader.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Any


class ExplorerError(Exception):
    """
    Base exception for all PyExplorer errors.
    
    Attributes:
        message: Human-readable error description
        path: File path associated with the error (if applicable)
        error_code: Numeric error code for programmatic handling
        context: Additional context about the error
    """
    
    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        self.error_code = error_code or 4000
        self.context = context or {}
        if path:
            self.context["path"] = path
    
    def __str__(self) -> str:
        return self.message
    
    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"path={self.path!r}, "
            f"error_code={self.error_code})"
        )


class DirectoryNotFoundError(ExplorerError):
    """
    The navigation target does not exist or is not a directory.
    
    Example:
        >>> raise DirectoryNotFoundError("/path/to/nowhere")
    """
    
    def __init__(
        self,
        path: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"Directory not found: {path}",
            path=path,
            error_code=4001,
            context=context
        )


class FileOperationError(ExplorerError):
    """
    A filesystem or OS call failed.
    
    Wraps the underlying OSError together with the path that was
    being operated on.
    
    Example:
        >>> raise FileOperationError("Failed to delete", "/tmp/x", reason="Permission denied")
    """
    
    def __init__(
        self,
        action: str,
        path: str,
        reason: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        message = f"{action}: {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(
            message=message,
            path=path,
            error_code=4010,
            context=context
        )
        self.action = action
        self.reason = reason
    
    @classmethod
    def from_os_error(cls, action: str, path: str, error: OSError) -> 'FileOperationError':
        """Build from an OSError, keeping its strerror as the reason."""
        reason = error.strerror or str(error)
        ctx = {}
        if error.errno is not None:
            ctx["errno"] = error.errno
        return cls(action, path, reason=reason, context=ctx)


class ConfigError(ExplorerError):
    """Raised when a configuration file cannot be loaded or parsed."""
    
    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=message,
            path=path,
            error_code=1000,
            context=context
        )
