from functools import wraps

import click

from omni_machines.common.exceptions import OmniException


class ClickExceptionRed(click.ClickException):
    def format_message(self) -> str:
        return click.style(self.message, fg="red")


def handle_exceptions(func):
    """Decorator to render omni errors raised by blocking commands."""

    @wraps(func)
    def wrapped(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except OmniException as e:
            raise ClickExceptionRed(str(e)) from None

    return wrapped
