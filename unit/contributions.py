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

from collections.abc import Iterable, Sequence
from typing import Any

from django.conf import settings
from django.utils.translation import gettext_lazy as _

from unit.constants import DEFAULT_CONTRIBUTION_TOLERANCE, FULL_CONTRIBUTION_PCT
from unit.groups import current_members, get_current_group
from unit.models import Group, Project, Task


Contribution = tuple[Project, Any]


# {{{ errors

class GroupSubmissionError(ValueError):
    """Base class for the reasons a group submission is rejected.

    :attr:`code` names the kind of failure and does not change between
    releases, so that callers may map it to their own responses.
    """

    code = "GroupSubmissionError"
    default_message = _("Invalid group submission.")

    def __init__(self, message: Any = None) -> None:
        if message is None:
            message = self.default_message
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return str(self.message)


class NotGroupTask(GroupSubmissionError):
    code = "NotGroupTask"
    default_message = _("Group submission only allowed for group tasks.")


class WrongGroupForSubmission(GroupSubmissionError):
    code = "WrongGroupForSubmission"
    default_message = _("Group submission for wrong group for unit.")


class NonMemberContribution(GroupSubmissionError):
    code = "NonMemberContribution"
    default_message = _("Not all contributions were from team members.")


class DuplicateMemberContribution(GroupSubmissionError):
    code = "DuplicateMemberContribution"
    default_message = _("Contributions were declared more than once "
            "for a group member.")


class MissingMemberContribution(GroupSubmissionError):
    code = "MissingMemberContribution"
    default_message = _("Contributions missing for some group members")


class InvalidContributionShare(GroupSubmissionError):
    code = "InvalidContributionShare"
    default_message = _("Contributions must be whole, non-negative "
            "percentages.")


class ContributionExcessive(GroupSubmissionError):
    code = "ContributionExcessive"
    default_message = _("Contribution percentages are excessive.")


class ContributionInsufficient(GroupSubmissionError):
    code = "ContributionInsufficient"
    default_message = _("Contribution percentages are insufficient.")

# }}}


def get_contribution_tolerance():
    return getattr(settings, "GROUPWORK_CONTRIBUTION_TOLERANCE",
            DEFAULT_CONTRIBUTION_TOLERANCE)


def validate_contributions(
        group: Group, task: Task,
        contributions: Iterable[Contribution]) -> Sequence[Contribution]:
    """Check that *contributions*, a sequence of ``(project, percentage)``
    tuples, may be recorded for a submission of *group* for *task*.

    Nothing is written to the database.

    :raises GroupSubmissionError: (one of its subclasses) naming the first
        check that failed.
    :return: *contributions* as a list.
    """
    contributions = list(contributions)

    # {{{ group and task belong together

    task_def = task.task_definition
    if task_def.group_set_id is None:
        raise NotGroupTask()

    task_group = get_current_group(task.project, task_def.group_set)
    if task_group is None or task_group.pk != group.pk:
        raise WrongGroupForSubmission()

    # }}}

    # {{{ every member, and only members, declared

    member_pks = set(current_members(group).values_list("pk", flat=True))
    declared_pks = [project.pk for project, _pct in contributions]

    if not set(declared_pks) <= member_pks:
        raise NonMemberContribution()

    if len(set(declared_pks)) != len(declared_pks):
        raise DuplicateMemberContribution()

    if set(declared_pks) != member_pks:
        raise MissingMemberContribution()

    # }}}

    # {{{ each share is a non-negative whole percentage

    # A single share above the allowed total also makes the total excessive.
    for _project, pct in contributions:
        if isinstance(pct, bool) or not isinstance(pct, int) or pct < 0:
            raise InvalidContributionShare()

    # }}}

    # {{{ total within tolerance

    total = sum(pct for _project, pct in contributions)
    tolerance = get_contribution_tolerance()

    if total > FULL_CONTRIBUTION_PCT + tolerance:
        raise ContributionExcessive()
    if total < FULL_CONTRIBUTION_PCT - tolerance:
        raise ContributionInsufficient()

    # }}}

    return contributions

# vim: foldmethod=marker
