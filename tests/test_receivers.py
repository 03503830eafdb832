from __future__ import annotations

__copyright__ = "Copyright (C) 2018 Dong Zhuang"

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

from django.test import TestCase

from unit.models import Task

from tests import factories


class TaskProvisioningTest(TestCase):
    def setUp(self):
        self.unit = factories.UnitFactory()
        self.projects = [
                factories.ProjectFactory(unit=self.unit) for _i in range(3)]

    def test_new_task_definition(self):
        task_def = factories.TaskDefinitionFactory(unit=self.unit)

        self.assertEqual(Task.objects.filter(task_definition=task_def).count(),
                len(self.projects))

    def test_new_project(self):
        task_defs = [factories.TaskDefinitionFactory(unit=self.unit)
                for _i in range(2)]

        project = factories.ProjectFactory(unit=self.unit)

        self.assertEqual(
            sorted(project.tasks.values_list("task_definition_id", flat=True)),
            sorted(td.pk for td in task_defs))

    def test_other_unit_unaffected(self):
        other_project = factories.ProjectFactory()

        factories.TaskDefinitionFactory(unit=self.unit)

        self.assertEqual(other_project.tasks.count(), 0)

    def test_update_does_not_duplicate(self):
        task_def = factories.TaskDefinitionFactory(unit=self.unit)
        task_def.name = "Renamed"
        task_def.save()

        project = self.projects[0]
        project.enrolled = False
        project.save()

        self.assertEqual(Task.objects.count(), len(self.projects))

    def test_task_of_group_task_definition(self):
        group_set = factories.GroupSetFactory(unit=self.unit)
        task_def = factories.TaskDefinitionFactory(
                unit=self.unit, group_set=group_set)

        for task in Task.objects.filter(task_definition=task_def):
            self.assertTrue(task.task_definition.is_group_task)
            self.assertEqual(task.contribution_pct, 100)

# vim: foldmethod=marker
