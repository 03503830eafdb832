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

import logging
from typing import Any

from django.utils.timezone import now
from django.utils.translation import gettext as _

from groupwork.utils import retry_transaction_decorator
from unit.auth import NotAuthorized, may_trigger_transition, may_view_project
from unit.constants import (
        PERSONAL_TASK_TRANSITIONS, TASK_TRANSITION_ALIASES,
        task_status as ts, task_transition as tt)
from unit.groups import current_members, get_current_group
from unit.models import Task


logger = logging.getLogger(__name__)


class InvalidTransition(ValueError):
    code = "InvalidTransition"

    def __init__(self, status: str | None, transition: str) -> None:
        self.status = status
        self.transition = transition

        if status is None:
            message = _("'%s' is not a known task transition.") % transition
        else:
            message = (
                    _("Cannot change task status from '%(status)s' "
                        "via '%(transition)s'.")
                    % {"status": status, "transition": transition})

        super().__init__(message)


# {{{ transition table

_STUDENT_WORKING = (ts.not_submitted, ts.working_on_it, ts.need_help)
_SUBMITTABLE = _STUDENT_WORKING + (ts.ready_to_mark, ts.fix_and_resubmit, ts.redo)
_ASSESSABLE = (
        ts.ready_to_mark, ts.discuss, ts.demonstrate,
        ts.working_on_it, ts.need_help)

# (transition, resulting status, statuses the transition applies to)
_TRANSITION_RULES = (
        (tt.not_submitted, ts.not_submitted,
            _STUDENT_WORKING + (ts.ready_to_mark,)),
        (tt.working_on_it, ts.working_on_it, _SUBMITTABLE),
        (tt.need_help, ts.need_help, _SUBMITTABLE),
        (tt.ready_to_mark, ts.ready_to_mark, _SUBMITTABLE),
        (tt.submit, ts.ready_to_mark, _SUBMITTABLE),

        (tt.discuss, ts.discuss, _ASSESSABLE),
        (tt.demonstrate, ts.demonstrate, _ASSESSABLE),
        (tt.fix_and_resubmit, ts.fix_and_resubmit,
            _ASSESSABLE + (ts.fix_and_resubmit,)),
        (tt.redo, ts.redo, _ASSESSABLE + (ts.redo,)),
        (tt.do_not_resubmit, ts.do_not_resubmit,
            _ASSESSABLE + (ts.do_not_resubmit,)),
        (tt.fail, ts.fail, _ASSESSABLE + (ts.fail,)),
        (tt.complete, ts.complete,
            _ASSESSABLE + (ts.fix_and_resubmit, ts.redo, ts.complete)),
        )

#: ``(current status, transition) -> new status``. Pairs that are not
#: present are invalid.
TRANSITION_TABLE: dict[tuple[str, str], str] = {
        (status, transition): new_status
        for transition, new_status, statuses in _TRANSITION_RULES
        for status in statuses}

KNOWN_TRANSITIONS = frozenset(transition for transition, _ns, _s
        in _TRANSITION_RULES)


def normalize_transition(transition: str) -> str:
    transition = TASK_TRANSITION_ALIASES.get(transition, transition)
    if transition not in KNOWN_TRANSITIONS:
        raise InvalidTransition(None, transition)
    return transition


def get_next_status(status: str, transition: str) -> str:
    try:
        return TRANSITION_TABLE[status, transition]
    except KeyError:
        raise InvalidTransition(status, transition) from None


def is_group_wide(transition: str) -> bool:
    return transition not in PERSONAL_TASK_TRANSITIONS

# }}}


# {{{ propagation

def get_transition_targets(task: Task, transition: str) -> list[Task]:
    """
    :return: the tasks *transition* is applied to when triggered on *task*,
        locked for update. These are the tasks of all current members of the
        task's group for group-wide transitions on group tasks, and *task*
        alone otherwise.
    """
    task_def = task.task_definition

    if is_group_wide(transition) and task_def.group_set_id is not None:
        group = get_current_group(task.project, task_def.group_set)
        if group is not None:
            return list(Task.objects
                    .select_for_update()
                    .filter(task_definition=task_def,
                        project__in=current_members(group))
                    .order_by("pk"))

    return [Task.objects.select_for_update().get(pk=task.pk)]


def _apply_transition(tasks: list[Task], transition: str) -> list[Task]:
    # Every new status is computed before the first write, so that an
    # invalid transition for any of the tasks leaves all of them unchanged.
    new_statuses = [get_next_status(task.status, transition) for task in tasks]

    change_time = now()
    for task, new_status in zip(tasks, new_statuses):
        task.status = new_status
        task.last_status_change_time = change_time
        task.save(update_fields=["status", "last_status_change_time"])

    return tasks


def propagate_transition(task: Task, transition: str) -> list[Task]:
    """Apply *transition* to *task* and, if applicable, to the tasks of the
    rest of its group, without checking who asked for it.

    Must be called inside a transaction.
    """
    transition = normalize_transition(transition)
    tasks = _apply_transition(get_transition_targets(task, transition),
            transition)

    logger.info("'%s' applied to %d task(s) of '%s' for '%s'",
            transition, len(tasks), task.task_definition, task.project)

    return tasks


@retry_transaction_decorator()
def trigger_transition(task: Task, transition: str, actor: Any) -> list[Task]:
    """Change the status of *task* by applying *transition* on behalf of
    *actor*.

    Group-wide transitions on a group task are applied to the tasks of every
    current member of the task's group, whether or not the group has made a
    submission. Either all of these tasks change, or none does.

    :raises InvalidTransition: if *transition* is unknown or is not defined
        for the status of one of the affected tasks.
    :raises NotAuthorized: if *actor* may not trigger *transition* on *task*.
    :return: the list of tasks that were changed.
    """
    task = (Task.objects
            .select_related("project__unit", "task_definition")
            .get(pk=task.pk))

    if not may_view_project(task.project, actor):
        raise NotAuthorized(
                _("'%(actor)s' may not change '%(task)s'")
                % {"actor": actor, "task": task})

    transition = normalize_transition(transition)

    if not may_trigger_transition(task, actor, transition):
        raise NotAuthorized(
                _("'%(actor)s' may not change '%(task)s' via '%(transition)s'")
                % {"actor": actor, "task": task, "transition": transition})

    return propagate_transition(task, transition)

# }}}

# vim: foldmethod=marker
