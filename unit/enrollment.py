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

from django.db import transaction
from django.db.models import QuerySet
from django.utils.translation import gettext as _

from unit.auth import NotAuthorized, may_view_project
from unit.groups import remove_member
from unit.models import Group, Project, Task, Unit


logger = logging.getLogger(__name__)


# {{{ enrollment

@transaction.atomic
def enroll_student(unit: Unit, user: Any) -> Project:
    """
    :return: the project of *user* in *unit*, created along with its tasks if
        the user was not enrolled before.
    """
    unit = Unit.objects.select_for_update().get(pk=unit.pk)

    project, created = Project.objects.get_or_create(unit=unit, student=user)

    if created:
        logger.info("'%s' enrolled in '%s'", user, unit)
    elif not project.enrolled:
        project.enrolled = True
        project.save(update_fields=["enrolled"])
        logger.info("'%s' re-enrolled in '%s'", user, unit)

    return project


@transaction.atomic
def withdraw_student(project: Project) -> Project:
    """Mark *project* as no longer enrolled and end all of its group
    memberships. Its tasks and membership history are kept.
    """
    for group in list(Group.objects.filter(
            memberships__project=project, memberships__active=True)):
        remove_member(group, project)

    project.enrolled = False
    project.save(update_fields=["enrolled"])
    logger.info("'%s' withdrew", project)

    return project

# }}}


# {{{ project access

def get_user_projects(user: Any) -> QuerySet:
    return (Project.objects
            .filter(student_id=user.pk, enrolled=True)
            .select_related("unit"))


def get_project_tasks(project: Project, user: Any) -> QuerySet:
    """
    :return: the tasks of *project*, in the order of their task definitions.
    :raises NotAuthorized: unless *user* is the project's student or on the
        staff of its unit.
    """
    if not may_view_project(project, user):
        raise NotAuthorized(
                _("'%(user)s' may not view the tasks of '%(project)s'")
                % {"user": user, "project": project})

    return (Task.objects
            .filter(project=project)
            .select_related("task_definition", "group_submission")
            .order_by("task_definition__id"))

# }}}

# vim: foldmethod=marker
