# smunch/errors.py


class SmunchError(Exception):
    """Base error carrying the HTTP status and a machine readable code."""

    status_code = 500
    code = "INTERNAL_ERROR"

    def __init__(self, message: str, code: str = None, status_code: int = None):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        if status_code:
            self.status_code = status_code

    def to_dict(self):
        return {"message": self.message, "code": self.code}


class NotFoundError(SmunchError):
    status_code = 404
    code = "NOT_FOUND"


class MailDeliveryError(SmunchError):
    status_code = 502
    code = "MAIL_DELIVERY_FAILED"
