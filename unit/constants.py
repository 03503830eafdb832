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

from django.utils.translation import pgettext_lazy


UNIT_CODE_REGEX = "(?P<unit_code>[-a-zA-Z0-9]+)"

FULL_CONTRIBUTION_PCT = 100
DEFAULT_CONTRIBUTION_TOLERANCE = 10


# {{{ unit role

class unit_role:  # noqa
    convenor = "convenor"
    tutor = "tutor"


UNIT_ROLE_CHOICES = (
        (unit_role.convenor, pgettext_lazy("Unit role", "Convenor")),
        (unit_role.tutor, pgettext_lazy("Unit role", "Tutor")),
        )

# }}}


# {{{ task status

class task_status:  # noqa
    not_submitted = "not_submitted"
    working_on_it = "working_on_it"
    need_help = "need_help"
    ready_to_mark = "ready_to_mark"

    discuss = "discuss"
    demonstrate = "demonstrate"
    fix_and_resubmit = "fix_and_resubmit"
    redo = "redo"
    do_not_resubmit = "do_not_resubmit"
    fail = "fail"
    complete = "complete"


TASK_STATUS_CHOICES = (
        (task_status.not_submitted,
            pgettext_lazy("Task status", "Not submitted")),
        (task_status.working_on_it,
            pgettext_lazy("Task status", "Working on it")),
        (task_status.need_help,
            pgettext_lazy("Task status", "Need help")),
        (task_status.ready_to_mark,
            pgettext_lazy("Task status", "Ready to mark")),
        (task_status.discuss,
            pgettext_lazy("Task status", "Discuss")),
        (task_status.demonstrate,
            pgettext_lazy("Task status", "Demonstrate")),
        (task_status.fix_and_resubmit,
            pgettext_lazy("Task status", "Fix and resubmit")),
        (task_status.redo,
            pgettext_lazy("Task status", "Redo")),
        (task_status.do_not_resubmit,
            pgettext_lazy("Task status", "Do not resubmit")),
        (task_status.fail,
            pgettext_lazy("Task status", "Fail")),
        (task_status.complete,
            pgettext_lazy("Task status", "Complete")),
        )

# }}}


# {{{ task transition

class task_transition:  # noqa
    not_submitted = task_status.not_submitted
    working_on_it = task_status.working_on_it
    need_help = task_status.need_help
    ready_to_mark = task_status.ready_to_mark

    # a group submission was recorded for the task
    submit = "submit"

    discuss = task_status.discuss
    demonstrate = task_status.demonstrate
    fix_and_resubmit = task_status.fix_and_resubmit
    redo = task_status.redo
    do_not_resubmit = task_status.do_not_resubmit
    fail = task_status.fail
    complete = task_status.complete


TASK_TRANSITION_ALIASES = {
        "rtm": task_transition.ready_to_mark,
        "fix": task_transition.fix_and_resubmit,
        }

# Transitions a student may trigger on their own task. Everything else is
# reserved for unit staff.
STUDENT_TASK_TRANSITIONS = frozenset([
        task_transition.not_submitted,
        task_transition.working_on_it,
        task_transition.need_help,
        task_transition.ready_to_mark,
        task_transition.submit,
        ])

# Transitions that only concern the member who triggers them and are never
# applied to the rest of the group.
PERSONAL_TASK_TRANSITIONS = frozenset([
        task_transition.working_on_it,
        task_transition.need_help,
        ])

# }}}

# vim: foldmethod=marker
