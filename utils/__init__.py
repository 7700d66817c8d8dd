"""
Utils Package - Contact form handling and project catalog
"""

from .exceptions import ContactFormError, ValidationError, TransportError, ApplicationError
from .contact import (
    ContactFormHandler,
    ContactFormView,
    StatusMessage,
    SubmissionResult,
    message_css_class,
    parse_response_body
)
from .catalog import ProjectCatalog, validate_entry, sections_present
from .projects_data import PROJECTS_DATA, TEMPLATE_PROJECT_ID

__all__ = [
    # Exceptions
    'ContactFormError',
    'ValidationError',
    'TransportError',
    'ApplicationError',

    # Contact
    'ContactFormHandler',
    'ContactFormView',
    'StatusMessage',
    'SubmissionResult',
    'message_css_class',
    'parse_response_body',

    # Catalog
    'ProjectCatalog',
    'validate_entry',
    'sections_present',
    'PROJECTS_DATA',
    'TEMPLATE_PROJECT_ID'
]
