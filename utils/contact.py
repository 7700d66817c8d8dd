"""
Contact Module - Contact form submission handler
Validates the form, relays it as JSON to the contact endpoint and drives
the form's busy state and status message through a view object.
"""

import logging
import threading
from collections import namedtuple

import requests

from .exceptions import ValidationError, TransportError, ApplicationError


FORM_FIELDS = ('name', 'email', 'message')
SUCCESS_MESSAGE = 'Message sent successfully!'
FAILURE_MESSAGE = ApplicationError.default_message

SubmissionResult = namedtuple('SubmissionResult', ['state', 'kind', 'text'])

_logger = logging.getLogger(__name__)


def message_css_class(kind):
    """CSS class of a rendered status message"""
    return f'form-message {kind}'


class ContactFormView:
    """
    UI surface driven by ContactFormHandler.

    Implementations wrap whatever renders the form: a browser bridge,
    a request-scoped collector or a test double.
    """

    def read_field(self, name):
        raise NotImplementedError

    def set_busy(self, busy):
        """Disable the submit control and swap label/loading indicator"""
        raise NotImplementedError

    def show_message(self, text, kind):
        raise NotImplementedError

    def hide_message(self):
        raise NotImplementedError

    def clear_fields(self):
        raise NotImplementedError


class StatusMessage:
    """
    Status message with an owned auto-hide timer.

    Every show() cancels the previous pending hide, and each scheduled
    hide carries a token so a late timer never hides a newer message.
    A delay of None disables auto-hide.
    """

    def __init__(self, view, delay=5, timer_factory=threading.Timer):
        self.view = view
        self.delay = delay
        self.timer_factory = timer_factory
        self._lock = threading.Lock()
        self._timer = None
        self._token = 0
        self.visible = False

    def show(self, text, kind):
        with self._lock:
            self._cancel_pending()
            self._token += 1
            self.view.show_message(text, kind)
            self.visible = True
            if self.delay is not None:
                timer = self.timer_factory(self.delay, self._expire, args=(self._token,))
                timer.daemon = True
                timer.start()
                self._timer = timer

    def hide(self):
        with self._lock:
            self._cancel_pending()
            self._token += 1
            self.view.hide_message()
            self.visible = False

    def cancel(self):
        """Drop any pending auto-hide without touching the view"""
        with self._lock:
            self._cancel_pending()

    def _cancel_pending(self):
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _expire(self, token):
        with self._lock:
            # a newer message owns the view now
            if token != self._token:
                return
            self._timer = None
            self.view.hide_message()
            self.visible = False


class ContactFormHandler:
    """
    Submits the contact form to a fixed endpoint.

    Args:
        endpoint (str): Absolute URL receiving the JSON payload
        view (ContactFormView): Form UI the handler reads and updates
        timeout (float): Request deadline in seconds; expiry is a transport failure
        message_timeout (float): Seconds before a status message auto-hides
        http: Object exposing requests-style post(); defaults to requests
        logger: Logger for diagnostics; defaults to this module's logger
        timer_factory: threading.Timer compatible factory for auto-hide
    """

    def __init__(self, endpoint, view, timeout=10, message_timeout=5,
                 http=None, logger=None, timer_factory=threading.Timer):
        if not endpoint:
            raise ValueError('Contact endpoint URL is required')
        self.endpoint = endpoint
        self.view = view
        self.timeout = timeout
        self.http = http or requests
        self.logger = logger or _logger
        self.status = StatusMessage(view, delay=message_timeout, timer_factory=timer_factory)
        self._lock = threading.Lock()
        self._busy = False

    @classmethod
    def from_config(cls, config, view, **kwargs):
        """Build a handler from a Flask-style config mapping"""
        kwargs.setdefault('timeout', config.get('CONTACT_REQUEST_TIMEOUT', 10))
        kwargs.setdefault('message_timeout', config.get('STATUS_MESSAGE_TIMEOUT', 5))
        return cls(config.get('CONTACT_API_ENDPOINT'), view, **kwargs)

    @property
    def busy(self):
        return self._busy

    def read_payload(self):
        """Read and trim the form fields, raising ValidationError if any is empty"""
        payload = {}
        for field in FORM_FIELDS:
            value = self.view.read_field(field)
            payload[field] = (value or '').strip()

        missing = [field for field in FORM_FIELDS if not payload[field]]
        if missing:
            raise ValidationError(missing=missing)
        return payload

    def submit(self):
        """
        Run one submission attempt.

        Returns:
            SubmissionResult: state is 'success', 'error', 'invalid' or 'busy'
        """
        with self._lock:
            if self._busy:
                self.logger.debug("Contact submission ignored: another one is in flight")
                return SubmissionResult('busy', None, None)

            try:
                payload = self.read_payload()
            except ValidationError as e:
                self.status.show(e.message, 'error')
                return SubmissionResult('invalid', 'error', e.message)

            self._busy = True

        try:
            self.view.set_busy(True)
            self.status.hide()

            data = self._post(payload)
            text = _body_text(data, 'message') or SUCCESS_MESSAGE
            self.status.show(text, 'success')
            self.view.clear_fields()
            self.logger.info("Contact message delivered")
            return SubmissionResult('success', 'success', text)

        except TransportError as e:
            self.logger.error(f"Contact form transport error: {e.__cause__!s}")
            self.status.show(e.message, 'error')
            return SubmissionResult('error', 'error', e.message)

        except ApplicationError as e:
            self.logger.warning(f"Contact endpoint rejected message ({e.status_code}): {e.message}")
            self.status.show(e.message, 'error')
            return SubmissionResult('error', 'error', e.message)

        finally:
            with self._lock:
                self._busy = False
            self.view.set_busy(False)

    def submit_in_background(self):
        """Run submit() on a daemon thread and return the thread"""
        thread = threading.Thread(target=self.submit, daemon=True)
        thread.start()
        return thread

    def close(self):
        """Cancel the pending auto-hide timer"""
        self.status.cancel()

    def _post(self, payload):
        try:
            response = self.http.post(
                self.endpoint,
                json=payload,
                headers={'Content-Type': 'application/json'},
                timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError() from e

        data = parse_response_body(response)
        if 200 <= response.status_code < 300:
            return data
        raise ApplicationError(response.status_code, _body_text(data, 'error'))


def parse_response_body(response):
    """Decode a JSON object body, or {} when the body is not one"""
    try:
        data = response.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


def _body_text(data, key):
    value = data.get(key)
    if isinstance(value, str) and value.strip():
        return value
    return None
