from __future__ import annotations


__copyright__ = "Copyright (C) 2017 Dong Zhuang"

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

from decimal import Decimal

from django.conf import settings
from django.core.checks import Critical, register
from django.core.exceptions import ImproperlyConfigured


INSTANCE_ERROR_PATTERN = "%(location)s must be an instance of %(types)s."
RANGE_ERROR_PATTERN = "%(location)s must be %(range)s."

GROUPWORK_CONTRIBUTION_TOLERANCE = "GROUPWORK_CONTRIBUTION_TOLERANCE"
GROUPWORK_TRANSACTION_MAX_TRIES = "GROUPWORK_TRANSACTION_MAX_TRIES"

GROUPWORK_STARTUP_CHECKS_TAG = "start_up_check"


class GroupWorkCriticalCheckMessage(Critical):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.obj = self.obj or ImproperlyConfigured.__name__


def check_groupwork_settings(app_configs, **kwargs):
    errors = []

    # {{{ check GROUPWORK_CONTRIBUTION_TOLERANCE
    tolerance = getattr(settings, GROUPWORK_CONTRIBUTION_TOLERANCE, None)
    if (isinstance(tolerance, bool)
            or not isinstance(tolerance, (int, float, Decimal))):
        errors.append(GroupWorkCriticalCheckMessage(
            msg=(INSTANCE_ERROR_PATTERN
                 % {"location": GROUPWORK_CONTRIBUTION_TOLERANCE,
                    "types": "int, float or Decimal"}),
            id="groupwork_contribution_tolerance.E001"
        ))
    elif not 0 <= tolerance < 100:
        errors.append(GroupWorkCriticalCheckMessage(
            msg=(RANGE_ERROR_PATTERN
                 % {"location": GROUPWORK_CONTRIBUTION_TOLERANCE,
                    "range": "at least 0 and less than 100"}),
            id="groupwork_contribution_tolerance.E002"
        ))
    # }}}

    # {{{ check GROUPWORK_TRANSACTION_MAX_TRIES
    max_tries = getattr(settings, GROUPWORK_TRANSACTION_MAX_TRIES, None)
    if isinstance(max_tries, bool) or not isinstance(max_tries, int):
        errors.append(GroupWorkCriticalCheckMessage(
            msg=(INSTANCE_ERROR_PATTERN
                 % {"location": GROUPWORK_TRANSACTION_MAX_TRIES,
                    "types": "int"}),
            id="groupwork_transaction_max_tries.E001"
        ))
    elif max_tries < 1:
        errors.append(GroupWorkCriticalCheckMessage(
            msg=(RANGE_ERROR_PATTERN
                 % {"location": GROUPWORK_TRANSACTION_MAX_TRIES,
                    "range": "a positive integer"}),
            id="groupwork_transaction_max_tries.E002"
        ))
    # }}}

    return errors


def register_startup_checks():
    register(check_groupwork_settings, GROUPWORK_STARTUP_CHECKS_TAG)

# vim: foldmethod=marker
