from __future__ import annotations

__doc__ = """
Model level behavior not covered by the membership, submission and
task status tests
"""

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

from datetime import date

from django.core.exceptions import ValidationError
from django.test import TestCase

from unit import models
from unit.constants import task_status

from tests import factories


class UnitTest(TestCase):
    def test_str(self):
        unit = factories.UnitFactory(code="COS10001")
        self.assertEqual(str(unit), "COS10001")

    def test_end_before_start(self):
        with self.assertRaises(ValidationError):
            factories.UnitFactory(
                    start_date=date(2024, 3, 1), end_date=date(2024, 2, 1))

        self.assertEqual(models.Unit.objects.count(), 0)

    def test_invalid_code(self):
        with self.assertRaises(ValidationError):
            factories.UnitFactory(code="COS 10001")

    def test_convenors(self):
        unit = factories.UnitFactory()
        convenor = factories.UnitRoleFactory(unit=unit).user
        tutor = factories.UnitRoleFactory(unit=unit, role="tutor").user

        self.assertEqual(list(unit.convenors()), [convenor])
        self.assertEqual(set(unit.staff_users()), {convenor, tutor})


class TaskDefinitionTest(TestCase):
    def test_group_set_of_other_unit(self):
        unit = factories.UnitFactory()
        other_group_set = factories.GroupSetFactory()

        with self.assertRaises(ValidationError):
            factories.TaskDefinitionFactory(unit=unit, group_set=other_group_set)

    def test_is_group_task(self):
        group_set = factories.GroupSetFactory()
        task_def = factories.TaskDefinitionFactory(unit=group_set.unit)
        self.assertFalse(task_def.is_group_task)

        task_def.group_set = group_set
        task_def.save()
        self.assertTrue(task_def.is_group_task)

    def test_deleting_group_set_keeps_tasks(self):
        group_set = factories.GroupSetFactory()
        task_def = factories.TaskDefinitionFactory(
                unit=group_set.unit, group_set=group_set)

        group_set.delete()
        task_def.refresh_from_db()

        self.assertIsNone(task_def.group_set)


class TaskTest(TestCase):
    def test_status_desc(self):
        project = factories.ProjectFactory()
        factories.TaskDefinitionFactory(unit=project.unit)

        task = project.tasks.get()
        self.assertEqual(task.status, task_status.not_submitted)
        self.assertEqual(str(task.get_status_desc()), "Not submitted")

        task.status = task_status.fix_and_resubmit
        self.assertEqual(str(task.get_status_desc()), "Fix and resubmit")


class UserTest(TestCase):
    def test_str(self):
        user = factories.UserFactory(first_name="Ada", last_name="Lovelace")
        self.assertEqual(str(user), "Ada Lovelace")

    def test_empty_institutional_id_stored_as_null(self):
        factories.UserFactory(institutional_id="")
        factories.UserFactory(institutional_id="")

        self.assertEqual(
            factories.UserFactory._meta.model.objects.filter(
                institutional_id__isnull=True).count(), 2)

# vim: foldmethod=marker
