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

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.validators import RegexValidator
from django.db import models
from django.utils.timezone import now
from django.utils.translation import gettext_lazy as _

from unit.constants import (
        UNIT_CODE_REGEX, FULL_CONTRIBUTION_PCT,
        unit_role, UNIT_ROLE_CHOICES,
        task_status, TASK_STATUS_CHOICES,
        )


# {{{ unit

class Unit(models.Model):
    code = models.CharField(max_length=200, unique=True,
            help_text=_("A unit code. Alphanumeric with dashes, "
            "no spaces (e.g. 'COS10001')."),
            verbose_name=_("Unit code"),
            db_index=True,
            validators=[
                RegexValidator(
                    "^"+UNIT_CODE_REGEX+"$",
                    message=_(
                        "Code may only contain letters, "
                        "numbers, and hyphens ('-').")),
                    ]
            )
    name = models.CharField(
            max_length=200,
            verbose_name=_("Unit name"),
            help_text=_("A human-readable name for the unit. "
                "(e.g. 'Introduction to Programming')"))
    start_date = models.DateField(null=True, blank=True,
            verbose_name=_("Start date"))
    end_date = models.DateField(null=True, blank=True,
            verbose_name=_("End date"))

    class Meta:
        verbose_name = _("Unit")
        verbose_name_plural = _("Units")
        ordering = ("code",)

    def __str__(self) -> str:
        return self.code

    def clean(self) -> None:
        super().clean()

        if (self.start_date is not None
                and self.end_date is not None
                and self.end_date < self.start_date):
            raise ValidationError(
                    {"end_date": _("Unit may not end before it starts.")})

    def save(self, *args, **kwargs):
        self.full_clean()
        return super().save(*args, **kwargs)

    def convenors(self) -> models.QuerySet:
        from django.contrib.auth import get_user_model
        return get_user_model().objects.filter(
                unit_roles__unit=self,
                unit_roles__role=unit_role.convenor)

    def staff_users(self) -> models.QuerySet:
        from django.contrib.auth import get_user_model
        return get_user_model().objects.filter(unit_roles__unit=self)


class UnitRole(models.Model):
    unit = models.ForeignKey(Unit, related_name="roles",
            verbose_name=_("Unit"), on_delete=models.CASCADE)
    user = models.ForeignKey(settings.AUTH_USER_MODEL,
            related_name="unit_roles",
            verbose_name=_("User"), on_delete=models.CASCADE)
    role = models.CharField(max_length=50,
            choices=UNIT_ROLE_CHOICES,
            verbose_name=_("Role"))

    class Meta:
        verbose_name = _("Unit role")
        verbose_name_plural = _("Unit roles")
        unique_together = (("unit", "user"),)
        ordering = ("unit", "role", "user")

    def __str__(self) -> str:
        # Translators: displayed format of UnitRole
        return _("%(user)s as %(role)s in %(unit)s") % {
                "user": self.user, "role": self.role, "unit": self.unit}

# }}}


# {{{ project

class Project(models.Model):
    """A single student's enrollment in a :class:`Unit`."""

    unit = models.ForeignKey(Unit, related_name="projects",
            verbose_name=_("Unit"), on_delete=models.CASCADE)
    student = models.ForeignKey(settings.AUTH_USER_MODEL,
            related_name="projects",
            verbose_name=_("Student"), on_delete=models.CASCADE)
    enrolled = models.BooleanField(default=True,
            verbose_name=_("Enrolled"))
    enroll_time = models.DateTimeField(default=now,
            verbose_name=_("Enroll time"))

    class Meta:
        verbose_name = _("Project")
        verbose_name_plural = _("Projects")
        unique_together = (("unit", "student"),)
        ordering = ("unit", "id")

    def __str__(self) -> str:
        # Translators: displayed format of Project: some student in some unit
        return _("%(student)s in %(unit)s") % {
                "student": self.student, "unit": self.unit}

# }}}


# {{{ groups

class GroupSet(models.Model):
    unit = models.ForeignKey(Unit, related_name="group_sets",
            verbose_name=_("Unit"), on_delete=models.CASCADE)
    name = models.CharField(max_length=200,
            verbose_name=_("Group set name"))

    class Meta:
        verbose_name = _("Group set")
        verbose_name_plural = _("Group sets")
        unique_together = (("unit", "name"),)
        ordering = ("unit", "id")

    def __str__(self) -> str:
        return f"{self.name} ({self.unit})"


class Group(models.Model):
    group_set = models.ForeignKey(GroupSet, related_name="groups",
            verbose_name=_("Group set"), on_delete=models.CASCADE)
    name = models.CharField(max_length=200,
            verbose_name=_("Group name"))

    class Meta:
        verbose_name = _("Group")
        verbose_name_plural = _("Groups")
        unique_together = (("group_set", "name"),)
        ordering = ("group_set", "id")

    def __str__(self) -> str:
        return f"{self.name} ({self.group_set})"

    @property
    def unit(self) -> Unit:
        return self.group_set.unit


class GroupMembership(models.Model):
    """Links a :class:`Project` to a :class:`Group`.

    Rows are never deleted when a project leaves a group. Instead,
    :attr:`active` is cleared, and set again if the project rejoins, so that
    there is at most one row per group and project.
    """

    group = models.ForeignKey(Group, related_name="memberships",
            verbose_name=_("Group"), on_delete=models.CASCADE)
    project = models.ForeignKey(Project, related_name="group_memberships",
            verbose_name=_("Project"), on_delete=models.CASCADE)
    active = models.BooleanField(default=True,
            verbose_name=_("Active"))

    creation_time = models.DateTimeField(default=now,
            verbose_name=_("Creation time"))
    last_change_time = models.DateTimeField(default=now,
            verbose_name=_("Last change time"))

    class Meta:
        verbose_name = _("Group membership")
        verbose_name_plural = _("Group memberships")
        unique_together = (("group", "project"),)
        ordering = ("group", "project")

    def __str__(self) -> str:
        return _("%(project)s in %(group)s") % {
                "project": self.project, "group": self.group}

    def clean(self) -> None:
        super().clean()

        if self.group.group_set.unit_id != self.project.unit_id:
            raise ValidationError(_("Group and project must live "
                    "in the same unit"))

# }}}


# {{{ tasks

class TaskDefinition(models.Model):
    unit = models.ForeignKey(Unit, related_name="task_definitions",
            verbose_name=_("Unit"), on_delete=models.CASCADE)
    group_set = models.ForeignKey(GroupSet, null=True, blank=True,
            related_name="task_definitions",
            help_text=_("If set, the task is completed by the groups "
                "of this group set rather than by individual students."),
            verbose_name=_("Group set"), on_delete=models.SET_NULL)

    name = models.CharField(max_length=200,
            verbose_name=_("Task name"))
    abbreviation = models.CharField(max_length=20,
            verbose_name=_("Abbreviation"))
    target_date = models.DateTimeField(null=True, blank=True,
            verbose_name=_("Target date"))

    class Meta:
        verbose_name = _("Task definition")
        verbose_name_plural = _("Task definitions")
        unique_together = (("unit", "abbreviation"),)
        ordering = ("unit", "id")

    def __str__(self) -> str:
        return f"{self.abbreviation} ({self.unit})"

    def clean(self) -> None:
        super().clean()

        if (self.group_set is not None
                and self.group_set.unit_id != self.unit_id):
            raise ValidationError(
                    {"group_set": _("Group set must live in the same unit "
                        "as the task definition")})

    def save(self, *args, **kwargs):
        self.full_clean()
        return super().save(*args, **kwargs)

    @property
    def is_group_task(self) -> bool:
        return self.group_set_id is not None


class GroupSubmission(models.Model):
    """A submission shared by the members of a :class:`Group` for one
    :class:`TaskDefinition`. There is at most one per group and task
    definition, and it is not changed after it has been created.
    """

    group = models.ForeignKey(Group, related_name="submissions",
            verbose_name=_("Group"), on_delete=models.CASCADE)
    task_definition = models.ForeignKey(TaskDefinition,
            related_name="group_submissions",
            verbose_name=_("Task definition"), on_delete=models.CASCADE)
    notes = models.TextField(blank=True,
            verbose_name=_("Notes"))
    submitted_by = models.ForeignKey(Project, null=True, blank=True,
            related_name="+",
            verbose_name=_("Submitted by"), on_delete=models.SET_NULL)
    creation_time = models.DateTimeField(default=now,
            verbose_name=_("Creation time"))

    class Meta:
        verbose_name = _("Group submission")
        verbose_name_plural = _("Group submissions")
        unique_together = (("group", "task_definition"),)
        ordering = ("group", "task_definition")

    def __str__(self) -> str:
        # Translators: displayed format of GroupSubmission
        return _("Submission of %(group)s for %(task_definition)s") % {
                "group": self.group, "task_definition": self.task_definition}

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise RuntimeError(
                    _("group submissions may not be changed once created"))
        return super().save(*args, **kwargs)


class Task(models.Model):
    project = models.ForeignKey(Project, related_name="tasks",
            verbose_name=_("Project"), on_delete=models.CASCADE)
    task_definition = models.ForeignKey(TaskDefinition, related_name="tasks",
            verbose_name=_("Task definition"), on_delete=models.CASCADE)

    status = models.CharField(max_length=50,
            choices=TASK_STATUS_CHOICES,
            default=task_status.not_submitted,
            verbose_name=_("Status"))
    last_status_change_time = models.DateTimeField(null=True, blank=True,
            verbose_name=_("Last status change time"))

    contribution_pct = models.IntegerField(default=FULL_CONTRIBUTION_PCT,
            help_text=_("Share of the group's work attributed to this "
                "student, in percent. 100 means full individual credit."),
            verbose_name=_("Contribution percentage"))
    group_submission = models.ForeignKey(GroupSubmission,
            null=True, blank=True, related_name="tasks",
            verbose_name=_("Group submission"), on_delete=models.SET_NULL)

    class Meta:
        verbose_name = _("Task")
        verbose_name_plural = _("Tasks")
        unique_together = (("project", "task_definition"),)
        ordering = ("project", "task_definition")

    def __str__(self) -> str:
        # Translators: displayed format of Task
        return _("%(task_definition)s for %(project)s: %(status)s") % {
                "task_definition": self.task_definition,
                "project": self.project,
                "status": self.status}

    def get_status_desc(self):
        return dict(TASK_STATUS_CHOICES).get(self.status)

# }}}

# vim: foldmethod=marker
