# core/errors.py

from fastapi import HTTPException


class StorageError(Exception):
    """
    Raised by the Supabase-backed providers when a read or write fails.

    The view-configuration engine never sees this error: a failed fetch
    leaves the corresponding input in its "not loaded" state, which every
    gate treats as "grant nothing".
    """

    def __init__(self, operation: str, detail: str = ""):
        self.operation = operation
        self.detail = detail
        message = f"{operation}: {detail}" if detail else operation
        super().__init__(message)


def extract_supabase_error(error: Exception) -> str:
    """
    Safely extract readable details from Supabase Python client errors.
    Handles:
      • PostgREST errors
      • GoTrue (Auth) errors
      • Generic Python exceptions
    """

    # Case 1: Supabase Auth / GoTrue / PostgREST errors
    message = getattr(error, "message", None)
    if message:
        return str(message)

    # Case 2: errors with args (common)
    if error.args:
        return str(error.args[0])

    # Case 3: Plain string fallback
    return str(error) or "Unknown Supabase error"


def storage_error(error: Exception, operation: str) -> StorageError:
    """
    Wrap a Supabase client exception into a StorageError.
    Returns the error (doesn't raise) so the caller can `raise ... from e`.
    """
    return StorageError(operation, extract_supabase_error(error))


def handle_supabase_error(error: Exception, operation: str = "Database operation", status_code: int = 500) -> HTTPException:
    """
    Handle Supabase errors with consistent formatting.
    Returns HTTPException (doesn't raise) so caller can customize or re-raise.

    Args:
        error: The exception that occurred (StorageError or raw client error)
        operation: Description of what operation failed (e.g., "Failed to enable module")
        status_code: HTTP status code (default 500)

    Returns:
        HTTPException with standardized error message
    """
    from core.logging_config import logger

    if isinstance(error, StorageError):
        error_detail = error.detail or error.operation
    else:
        error_detail = extract_supabase_error(error)
    logger.error(f"{operation}: {error_detail}")

    # Provide user-friendly messages for common errors
    error_lower = error_detail.lower()
    if "duplicate" in error_lower or "unique" in error_lower:
        return HTTPException(status_code=400, detail=f"{operation}: Record already exists")
    elif "foreign key" in error_lower:
        return HTTPException(status_code=400, detail=f"{operation}: Invalid reference")
    elif "not found" in error_lower or "does not exist" in error_lower:
        return HTTPException(status_code=404, detail=f"{operation}: Resource not found")
    else:
        return HTTPException(status_code=status_code, detail=f"{operation} failed")
