from __future__ import annotations

__copyright__ = "Copyright (C) 2014 Andreas Kloeckner"

__license__ = """
Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in
all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN
THE SOFTWARE.
"""

from typing import Any


# {{{ transactions

def retry_transaction(f: Any, args: tuple, kwargs: dict | None = None,
        max_tries: int | None = None) -> Any:
    """Run *f* inside :func:`django.db.transaction.atomic`, retrying it when
    the database reports a serialization failure.

    Any other exception, in particular the domain errors raised by *f*, rolls
    back the transaction and propagates on the first attempt.
    """
    if kwargs is None:
        kwargs = {}

    from django.conf import settings
    from django.db import transaction
    from django.db.utils import OperationalError

    if max_tries is None:
        max_tries = getattr(settings, "GROUPWORK_TRANSACTION_MAX_TRIES", 5)

    assert max_tries > 0
    while True:
        try:
            with transaction.atomic():
                return f(*args, **kwargs)
        except OperationalError:
            max_tries -= 1
            if not max_tries:
                raise

        from random import uniform
        from time import sleep
        sleep(uniform(0.05, 0.2))


class retry_transaction_decorator:  # noqa
    def __init__(self, max_tries: int | None = None) -> None:
        self.max_tries = max_tries

    def __call__(self, f: Any) -> Any:
        from functools import update_wrapper

        def wrapper(*args, **kwargs):
            return retry_transaction(f, args, kwargs,
                    max_tries=self.max_tries)

        update_wrapper(wrapper, f)
        return wrapper

# }}}

# vim: foldmethod=marker
