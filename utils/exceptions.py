"""
Exceptions Module - Failure kinds of a contact form submission
All of them are recovered inside the submission handler.
"""


class ContactFormError(Exception):
    """Base class for contact form submission failures"""

    default_message = 'Failed to send message. Please try again.'

    def __init__(self, message=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class ValidationError(ContactFormError):
    """Raised when a required field is empty after trimming"""

    default_message = 'Please fill in all fields'

    def __init__(self, missing=None, message=None):
        super().__init__(message)
        self.missing = list(missing or [])


class TransportError(ContactFormError):
    """Raised when the request never produced a response"""

    default_message = 'Network error. Please check your connection and try again.'


class ApplicationError(ContactFormError):
    """Raised when the endpoint answered with a non-success status"""

    def __init__(self, status_code, message=None):
        super().__init__(message)
        self.status_code = status_code
