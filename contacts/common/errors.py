class ContactsError(Exception):
    """Base error; carries the HTTP status and the message sent to the client."""

    status = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_body(self):
        return {"error": self.message}


class ValidationError(ContactsError):
    status = 400


class NotFoundError(ContactsError):
    status = 404

    def __init__(self, message="Could not find contact with provided name"):
        super().__init__(message)


class RouteNotFoundError(ContactsError):
    status = 404

    def __init__(self, message="Not Found"):
        super().__init__(message)


class StoreError(ContactsError):
    """A DynamoDB call failed. The route decides what the client is told."""

    status = 500

    def __init__(self, operation, cause):
        super().__init__(f"{operation} failed: {cause}")
        self.operation = operation
        self.cause = cause
