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

from django.db.models import QuerySet
from django.utils.timezone import now
from django.utils.translation import gettext as _

from groupwork.utils import retry_transaction_decorator
from unit.models import Group, GroupMembership, GroupSet, Project


logger = logging.getLogger(__name__)


# {{{ membership changes

def _deactivate(membership: GroupMembership) -> None:
    membership.active = False
    membership.last_change_time = now()
    membership.save(update_fields=["active", "last_change_time"])


@retry_transaction_decorator()
def add_member(group: Group, project: Project) -> GroupMembership:
    """Make *project* an active member of *group*.

    A membership the project held in the group earlier is reactivated rather
    than duplicated. An active membership in another group of the same
    group set is ended first.
    """

    # Changes to a group and to a project's memberships are serialized
    # on their rows.
    group = Group.objects.select_for_update().get(pk=group.pk)
    project = Project.objects.select_for_update().get(pk=project.pk)

    if group.group_set.unit_id != project.unit_id:
        raise ValueError(
                _("'%(project)s' may not join '%(group)s': "
                    "they belong to different units")
                % {"project": project, "group": group})

    for other_membership in (GroupMembership.objects
            .filter(project=project, active=True,
                group__group_set_id=group.group_set_id)
            .exclude(group=group)
            .select_related("group")):
        _deactivate(other_membership)
        logger.info("'%s' left group '%s' to join '%s'",
                project, other_membership.group, group)

    membership, created = GroupMembership.objects.get_or_create(
            group=group, project=project,
            defaults={"active": True})

    if created:
        logger.info("'%s' joined group '%s'", project, group)
    elif not membership.active:
        membership.active = True
        membership.last_change_time = now()
        membership.save(update_fields=["active", "last_change_time"])
        logger.info("'%s' rejoined group '%s'", project, group)
    else:
        logger.debug("'%s' already is a member of '%s'", project, group)

    return membership


@retry_transaction_decorator()
def remove_member(group: Group, project: Project) -> GroupMembership | None:
    """End the active membership of *project* in *group*, if there is one.
    The membership row is kept as a record of past membership.
    """
    group = Group.objects.select_for_update().get(pk=group.pk)

    try:
        membership = GroupMembership.objects.get(
                group=group, project=project, active=True)
    except GroupMembership.DoesNotExist:
        logger.debug("'%s' is not a member of '%s'", project, group)
        return None

    _deactivate(membership)
    logger.info("'%s' left group '%s'", project, group)

    return membership

# }}}


# {{{ membership queries

def current_members(group: Group) -> QuerySet:
    return Project.objects.filter(
            group_memberships__group=group,
            group_memberships__active=True)


def past_members(group: Group) -> QuerySet:
    return Project.objects.filter(
            group_memberships__group=group,
            group_memberships__active=False)


def has_user(group: Group, user: Any) -> bool:
    if user is None or user.pk is None:
        return False
    return current_members(group).filter(student_id=user.pk).exists()


def get_current_group(project: Project, group_set: GroupSet) -> Group | None:
    """
    :return: the group of *group_set* in which *project* currently is a
        member, or *None*.
    """
    return Group.objects.filter(
            group_set=group_set,
            memberships__project=project,
            memberships__active=True).first()

# }}}

# vim: foldmethod=marker
