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

from unit import task_states
from unit.auth import NotAuthorized
from unit.constants import task_status, task_transition
from unit.groups import remove_member
from unit.models import Task
from unit.submissions import create_submission
from unit.task_states import InvalidTransition, trigger_transition

from tests import factories
from tests.base_test_mixins import UnitTestMixinBase


class TransitionTableTest(TestCase):
    def test_aliases(self):
        self.assertEqual(task_states.normalize_transition("rtm"),
                task_transition.ready_to_mark)
        self.assertEqual(task_states.normalize_transition("fix"),
                task_transition.fix_and_resubmit)
        self.assertEqual(task_states.normalize_transition("complete"),
                task_transition.complete)

    def test_unknown_transition(self):
        with self.assertRaises(InvalidTransition) as cm:
            task_states.normalize_transition("party")

        self.assertIsNone(cm.exception.status)
        self.assertEqual(cm.exception.transition, "party")

    def test_next_status(self):
        for status, transition, expected in [
                (task_status.not_submitted, task_transition.ready_to_mark,
                    task_status.ready_to_mark),
                (task_status.ready_to_mark, task_transition.ready_to_mark,
                    task_status.ready_to_mark),
                (task_status.not_submitted, task_transition.submit,
                    task_status.ready_to_mark),
                (task_status.ready_to_mark, task_transition.complete,
                    task_status.complete),
                (task_status.ready_to_mark, task_transition.fix_and_resubmit,
                    task_status.fix_and_resubmit),
                (task_status.fix_and_resubmit, task_transition.ready_to_mark,
                    task_status.ready_to_mark),
                (task_status.redo, task_transition.working_on_it,
                    task_status.working_on_it),
                (task_status.discuss, task_transition.demonstrate,
                    task_status.demonstrate),
                ]:
            with self.subTest(status=status, transition=transition):
                self.assertEqual(
                    task_states.get_next_status(status, transition), expected)

    def test_invalid_next_status(self):
        for status, transition in [
                (task_status.complete, task_transition.working_on_it),
                (task_status.complete, task_transition.submit),
                (task_status.fail, task_transition.ready_to_mark),
                (task_status.do_not_resubmit, task_transition.need_help),
                (task_status.not_submitted, task_transition.complete),
                ]:
            with self.subTest(status=status, transition=transition):
                with self.assertRaises(InvalidTransition) as cm:
                    task_states.get_next_status(status, transition)
                self.assertEqual(cm.exception.status, status)

    def test_table_covers_known_states(self):
        from unit.constants import TASK_STATUS_CHOICES
        known = {status for status, _desc in TASK_STATUS_CHOICES}

        for (status, transition), new_status in (
                task_states.TRANSITION_TABLE.items()):
            self.assertIn(status, known)
            self.assertIn(new_status, known)
            self.assertIn(transition, task_states.KNOWN_TRANSITIONS)

    def test_group_wide(self):
        self.assertFalse(task_states.is_group_wide(task_transition.working_on_it))
        self.assertFalse(task_states.is_group_wide(task_transition.need_help))
        self.assertTrue(task_states.is_group_wide(task_transition.ready_to_mark))
        self.assertTrue(task_states.is_group_wide(task_transition.complete))


class GroupTransitionTest(UnitTestMixinBase, TestCase):
    def setUp(self):
        super().setUp()
        self.grp1, self.grp2 = self.get_groups()
        self.p1, self.p2 = self.get_members(self.grp1)
        self.p3, self.p4 = self.get_members(self.grp2)

    def submit(self):
        return create_submission(self.grp1, self.get_task(self.p1),
                "notes", self.contributions([self.p1, self.p2], 50, 50))

    def test_rtm_by_convenor(self):
        self.submit()

        changed = trigger_transition(
                self.get_task(self.p1), "rtm", self.convenor)

        self.assertEqual(len(changed), 2)
        self.assertEqual(
            self.get_statuses([self.p1, self.p2]),
            [task_status.ready_to_mark] * 2)
        self.assertEqual(
            self.get_statuses([self.p3, self.p4]),
            [task_status.not_submitted] * 2)

    def test_rtm_by_student(self):
        self.submit()

        trigger_transition(self.get_task(self.p1), "rtm", self.p1.student)

        self.assertEqual(
            self.get_statuses([self.p1, self.p2]),
            [task_status.ready_to_mark] * 2)

    def test_rtm_without_submission(self):
        trigger_transition(self.get_task(self.p1), "rtm", self.p1.student)

        self.assertEqual(
            self.get_statuses([self.p1, self.p2]),
            [task_status.ready_to_mark] * 2)
        self.assertEqual(
            self.get_statuses([self.p3, self.p4]),
            [task_status.not_submitted] * 2)

    def test_working_on_it_not_propagated(self):
        trigger_transition(
                self.get_task(self.p1), "working_on_it", self.p1.student)

        self.assertEqual(
            self.get_statuses([self.p1, self.p2]),
            [task_status.working_on_it, task_status.not_submitted])

    def test_working_on_it_after_submission(self):
        self.submit()

        trigger_transition(
                self.get_task(self.p1), "working_on_it", self.p1.student)

        self.assertEqual(
            self.get_statuses([self.p1, self.p2]),
            [task_status.working_on_it, task_status.ready_to_mark])

    def test_need_help_not_propagated(self):
        trigger_transition(self.get_task(self.p2), "need_help", self.convenor)

        self.assertEqual(
            self.get_statuses([self.p1, self.p2]),
            [task_status.not_submitted, task_status.need_help])

    def test_assessment_propagated(self):
        self.submit()

        trigger_transition(self.get_task(self.p2), "fix", self.convenor)
        self.assertEqual(
            self.get_statuses([self.p1, self.p2]),
            [task_status.fix_and_resubmit] * 2)

        trigger_transition(self.get_task(self.p2), "rtm", self.p2.student)
        trigger_transition(self.get_task(self.p1), "complete", self.convenor)
        self.assertEqual(
            self.get_statuses([self.p1, self.p2]),
            [task_status.complete] * 2)

    def test_status_change_time(self):
        changed = trigger_transition(
                self.get_task(self.p1), "rtm", self.p1.student)

        change_times = {task.last_status_change_time for task in changed}
        self.assertEqual(len(change_times), 1)
        self.assertIsNotNone(self.get_task(self.p2).last_status_change_time)
        self.assertIsNone(self.get_task(self.p3).last_status_change_time)

    def test_other_student_not_authorized(self):
        with self.assertRaises(NotAuthorized):
            trigger_transition(self.get_task(self.p1), "rtm", self.p3.student)

        self.assertEqual(
            self.get_statuses([self.p1, self.p2]),
            [task_status.not_submitted] * 2)

    def test_groupmate_not_authorized(self):
        with self.assertRaises(NotAuthorized):
            trigger_transition(self.get_task(self.p1), "rtm", self.p2.student)

        self.assertEqual(self.get_task(self.p1).status,
                task_status.not_submitted)

    def test_student_may_not_assess(self):
        self.submit()

        with self.assertRaises(NotAuthorized):
            trigger_transition(
                    self.get_task(self.p1), "complete", self.p1.student)

        self.assertEqual(
            self.get_statuses([self.p1, self.p2]),
            [task_status.ready_to_mark] * 2)

    def test_tutor_may_assess(self):
        tutor = factories.UnitRoleFactory(unit=self.unit, role="tutor").user
        self.submit()

        trigger_transition(self.get_task(self.p1), "discuss", tutor)

        self.assertEqual(
            self.get_statuses([self.p1, self.p2]),
            [task_status.discuss] * 2)

    def test_invalid_transition_no_change(self):
        task = self.get_task(self.p1)
        task.status = task_status.complete
        task.save()

        with self.assertRaises(InvalidTransition):
            trigger_transition(
                    self.get_task(self.p1), "working_on_it", self.p1.student)

        self.assertEqual(self.get_task(self.p1).status, task_status.complete)

    def test_unknown_transition_no_change(self):
        with self.assertRaises(InvalidTransition):
            trigger_transition(self.get_task(self.p1), "party", self.convenor)

        self.assertEqual(
            self.get_statuses([self.p1, self.p2]),
            [task_status.not_submitted] * 2)

    def test_outsider_unknown_transition_not_authorized(self):
        with self.assertRaises(NotAuthorized):
            trigger_transition(self.get_task(self.p1), "party", self.p3.student)

        self.assertEqual(
            self.get_statuses([self.p1, self.p2]),
            [task_status.not_submitted] * 2)

    def test_owner_unknown_transition_invalid(self):
        with self.assertRaises(InvalidTransition):
            trigger_transition(self.get_task(self.p1), "party", self.p1.student)

    def test_sibling_in_invalid_state_aborts(self):
        Task.objects.filter(
                project=self.p2, task_definition=self.task_defs[0]
                ).update(status=task_status.complete)

        with self.assertRaises(InvalidTransition):
            trigger_transition(self.get_task(self.p1), "rtm", self.p1.student)

        self.assertEqual(
            self.get_statuses([self.p1, self.p2]),
            [task_status.not_submitted, task_status.complete])

    def test_past_member_unaffected(self):
        remove_member(self.grp1, self.p2)

        changed = trigger_transition(
                self.get_task(self.p1), "rtm", self.p1.student)

        self.assertEqual([task.project for task in changed], [self.p1])
        self.assertEqual(
            self.get_statuses([self.p1, self.p2]),
            [task_status.ready_to_mark, task_status.not_submitted])

    def test_no_group_changes_only_task(self):
        remove_member(self.grp1, self.p1)

        trigger_transition(self.get_task(self.p1), "rtm", self.p1.student)

        self.assertEqual(
            self.get_statuses([self.p1, self.p2]),
            [task_status.ready_to_mark, task_status.not_submitted])

    def test_individual_task(self):
        trigger_transition(self.get_task(self.p1, 1), "rtm", self.p1.student)

        self.assertEqual(
            self.get_statuses([self.p1, self.p2], 1),
            [task_status.ready_to_mark, task_status.not_submitted])
        self.assertEqual(
            self.get_statuses([self.p1, self.p2], 0),
            [task_status.not_submitted] * 2)

# vim: foldmethod=marker
