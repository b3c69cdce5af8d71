import logging
from typing import Optional, Any, Dict

class FileTreeError(Exception):
    """Base exception class for filetree errors"""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.details = details or {}

class FileOperationError(FileTreeError):
    """Raised when a requested file operation cannot be carried out"""
    pass

class PathOutsideRootError(FileTreeError):
    """Raised when a client addresses a path outside the browsed root"""
    pass

def setup_logging(level: str = "INFO", log_file: Optional[str] = "filetree.log"):
    """Configure logging for the application"""
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )

def log_operation(logger: logging.Logger, command: Optional[str], params: Dict[str, Any]):
    """Record a tree command coming in from a client"""
    logger.info("Command: %s %s", command, params)

def handle_error(logger: logging.Logger, error: Exception, operation: str) -> Dict[str, Any]:
    """
    Log a failed command and build the error message sent back to the client.

    Client mistakes (FileTreeError) are logged as warnings and their details
    passed on. Anything else is logged with its traceback; the client only
    learns the exception type and message.
    """
    details = {
        "type": type(error).__name__,
        "operation": operation,
    }

    if isinstance(error, FileTreeError):
        details.update(error.details)
        logger.warning("Refused %s: %s", operation, error)
    else:
        logger.error("Error during %s: %s", operation, error, exc_info=True)

    return {
        "type": "error",
        "message": str(error),
        "details": details
    }
