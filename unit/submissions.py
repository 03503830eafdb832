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
from collections.abc import Iterable

from groupwork.utils import retry_transaction_decorator
from unit.constants import task_transition
from unit.contributions import Contribution, validate_contributions
from unit.models import Group, GroupSubmission, Task, TaskDefinition
from unit.task_states import propagate_transition


logger = logging.getLogger(__name__)


def get_submission(
        group: Group, task_definition: TaskDefinition
        ) -> GroupSubmission | None:
    return GroupSubmission.objects.filter(
            group=group, task_definition=task_definition).first()


@retry_transaction_decorator()
def create_submission(
        group: Group, task: Task, message: str,
        contributions: Iterable[Contribution]) -> GroupSubmission:
    """Record the submission of *group* for the task definition of *task*.

    :arg contributions: a sequence of ``(project, percentage)`` tuples, one
        for each current member of *group*.

    There is only ever one submission per group and task definition. If it
    exists already, it is returned unchanged and *contributions* are
    ignored. Otherwise, each member's task is linked to the new submission
    with its declared contribution, and the tasks of the group receive
    the ``submit`` transition.

    :raises unit.contributions.GroupSubmissionError: if *contributions* are
        rejected. Nothing is changed in that case.
    :raises unit.task_states.InvalidTransition: if the task of some member
        may no longer be submitted. Nothing is changed in that case either.
    """

    # Submissions of one group are serialized on the group's row.
    group = Group.objects.select_for_update().get(pk=group.pk)
    task = (Task.objects
            .select_related("project", "task_definition__group_set")
            .get(pk=task.pk))

    contributions = validate_contributions(group, task, contributions)

    task_def = task.task_definition
    submission, created = GroupSubmission.objects.get_or_create(
            group=group, task_definition=task_def,
            defaults={
                "notes": message,
                "submitted_by": task.project,
                })

    if not created:
        logger.info("'%s' already has a submission for '%s', "
                "ignoring new contributions", group, task_def)
        return submission

    for project, pct in contributions:
        member_task = Task.objects.select_for_update().get(
                project=project, task_definition=task_def)
        member_task.contribution_pct = pct
        member_task.group_submission = submission
        member_task.save(update_fields=["contribution_pct", "group_submission"])

    propagate_transition(task, task_transition.submit)

    logger.info("'%s' submitted '%s'", group, task_def)

    return submission

# vim: foldmethod=marker
