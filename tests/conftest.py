"""Pytest fixtures for the contact handler, catalog and Flask app."""

import pytest

from app import create_app


class FakeView:
    """In-memory contact form: records every call the handler makes."""

    def __init__(self, name='', email='', message=''):
        self.fields = {'name': name, 'email': email, 'message': message}
        self.busy = False
        self.busy_history = []
        self.message = None
        self.kind = None
        self.visible = False
        self.hide_calls = 0

    def read_field(self, name):
        return self.fields[name]

    def set_busy(self, busy):
        self.busy = busy
        self.busy_history.append(busy)

    def show_message(self, text, kind):
        self.message = text
        self.kind = kind
        self.visible = True

    def hide_message(self):
        self.visible = False
        self.hide_calls += 1

    def clear_fields(self):
        self.fields = {key: '' for key in self.fields}


class FakeResponse:
    def __init__(self, status_code=200, body=None, raw=None):
        self.status_code = status_code
        self._body = body
        self._raw = raw

    def json(self):
        if self._raw is not None:
            raise ValueError(f"Expecting value: {self._raw!r}")
        return self._body


class FakeHttp:
    """requests-style transport returning a canned response or raising."""

    def __init__(self, response=None, error=None, on_post=None):
        self.response = response or FakeResponse(200, {})
        self.error = error
        self.on_post = on_post
        self.calls = []

    def post(self, url, **kwargs):
        self.calls.append({'url': url, **kwargs})
        if self.on_post is not None:
            self.on_post()
        if self.error is not None:
            raise self.error
        return self.response


class ManualTimer:
    """threading.Timer stand-in fired explicitly by the test."""

    def __init__(self, interval, function, args=None):
        self.interval = interval
        self.function = function
        self.args = args or ()
        self.daemon = False
        self.started = False
        self.cancelled = False

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        if not self.cancelled:
            self.function(*self.args)


class TimerFactory:
    def __init__(self):
        self.timers = []

    def __call__(self, interval, function, args=None):
        timer = ManualTimer(interval, function, args=args)
        self.timers.append(timer)
        return timer


@pytest.fixture
def view():
    return FakeView(name='Ada Lovelace', email='ada@example.com', message='Hello there')


@pytest.fixture
def timers():
    return TimerFactory()


@pytest.fixture
def make_response():
    return FakeResponse


@pytest.fixture
def make_http():
    return FakeHttp


@pytest.fixture
def app():
    return create_app('testing')


@pytest.fixture
def client(app):
    return app.test_client()
