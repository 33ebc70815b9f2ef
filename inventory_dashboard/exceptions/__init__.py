"""Custom exceptions for the inventory dashboard."""

class DashboardError(Exception):
    """Base exception for all application errors."""
    def __init__(self, message="An internal error occurred", status_code=500, payload=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload

    def to_dict(self):
        rv = dict(self.payload or ())
        rv['message'] = self.message
        rv['status'] = 'error'
        return rv

class ValidationError(DashboardError):
    """Raised when a record fails its required-field checks or names unknown fields."""
    def __init__(self, message, fields=None):
        payload = {'fields': list(fields)} if fields else None
        super().__init__(message, 400, payload)
        self.fields = list(fields or ())

class NotFoundError(DashboardError):
    """Exception raised when a record or collection is not found."""
    def __init__(self, message="Resource not found", payload=None):
        super().__init__(message, 404, payload)

class StorageError(DashboardError):
    """Raised when a collection cannot be read from or written to its store."""
    def __init__(self, collection, detail=None):
        message = f"Could not access collection '{collection}'"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message, 500, {'collection': collection})
        self.collection = collection
