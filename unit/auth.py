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

from typing import TYPE_CHECKING, Any

from django.core.exceptions import PermissionDenied
from django.utils.translation import gettext_lazy as _

from unit.constants import STUDENT_TASK_TRANSITIONS


if TYPE_CHECKING:
    from unit.models import Project, Task, Unit


class NotAuthorized(PermissionDenied):
    code = "NotAuthorized"

    def __init__(self, message: Any = None) -> None:
        if message is None:
            message = _("Not authorized.")
        super().__init__(message)
        self.message = message


# {{{ role lookup

def get_unit_role(unit: Unit, user: Any) -> str | None:
    """
    :return: the :class:`~unit.constants.unit_role` *user* holds in *unit*,
        or *None* for students and anybody else.
    """
    if user is None or not user.is_authenticated:
        return None

    from unit.models import UnitRole
    try:
        return UnitRole.objects.get(unit=unit, user=user).role
    except UnitRole.DoesNotExist:
        return None


def is_unit_staff(unit: Unit, user: Any) -> bool:
    return get_unit_role(unit, user) is not None


def is_project_owner(project: Project, user: Any) -> bool:
    return (user is not None
            and user.is_authenticated
            and project.student_id == user.pk)

# }}}


def may_view_project(project: Project, user: Any) -> bool:
    return is_project_owner(project, user) or is_unit_staff(project.unit, user)


def may_trigger_transition(task: Task, user: Any, transition: str) -> bool:
    if is_unit_staff(task.project.unit, user):
        return True

    return (is_project_owner(task.project, user)
            and transition in STUDENT_TASK_TRANSITIONS)

# vim: foldmethod=marker
