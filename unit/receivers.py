from __future__ import annotations

__copyright__ = "Copyright (C) 2016 Dong Zhuang, Andreas Kloeckner"

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

from django.db import transaction
from django.db.models.signals import post_save
from django.dispatch import receiver

from unit.models import Project, Task, TaskDefinition


# {{{ Every project carries one task per task definition of its unit

@receiver(post_save, sender=Project, dispatch_uid="create_tasks_for_project")
@transaction.atomic
def create_tasks_for_project(
        sender: Any,
        instance: Project,
        created: bool,
        raw: bool = False,
        **kwargs: Any) -> None:
    if not created or raw:
        return

    Task.objects.bulk_create(
            [Task(project=instance, task_definition=task_def)
                for task_def in TaskDefinition.objects.filter(
                    unit_id=instance.unit_id)],
            ignore_conflicts=True)


@receiver(post_save, sender=TaskDefinition,
        dispatch_uid="create_tasks_for_task_definition")
@transaction.atomic
def create_tasks_for_task_definition(
        sender: Any,
        instance: TaskDefinition,
        created: bool,
        raw: bool = False,
        **kwargs: Any) -> None:
    if not created or raw:
        return

    Task.objects.bulk_create(
            [Task(project=project, task_definition=instance)
                for project in Project.objects.filter(
                    unit_id=instance.unit_id)],
            ignore_conflicts=True)

# }}}

# vim: foldmethod=marker
