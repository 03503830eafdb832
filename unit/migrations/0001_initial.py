from django.conf import settings
from django.db import migrations, models
import django.core.validators
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Unit",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("code", models.CharField(db_index=True, help_text="A unit code. Alphanumeric with dashes, no spaces (e.g. 'COS10001').", max_length=200, unique=True, validators=[django.core.validators.RegexValidator("^(?P<unit_code>[-a-zA-Z0-9]+)$", message="Code may only contain letters, numbers, and hyphens ('-').")], verbose_name="Unit code")),
                ("name", models.CharField(help_text="A human-readable name for the unit. (e.g. 'Introduction to Programming')", max_length=200, verbose_name="Unit name")),
                ("start_date", models.DateField(blank=True, null=True, verbose_name="Start date")),
                ("end_date", models.DateField(blank=True, null=True, verbose_name="End date")),
            ],
            options={
                "verbose_name": "Unit",
                "verbose_name_plural": "Units",
                "ordering": ("code",),
            },
        ),
        migrations.CreateModel(
            name="Project",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("enrolled", models.BooleanField(default=True, verbose_name="Enrolled")),
                ("enroll_time", models.DateTimeField(default=django.utils.timezone.now, verbose_name="Enroll time")),
                ("student", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="projects", to=settings.AUTH_USER_MODEL, verbose_name="Student")),
                ("unit", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="projects", to="unit.unit", verbose_name="Unit")),
            ],
            options={
                "verbose_name": "Project",
                "verbose_name_plural": "Projects",
                "ordering": ("unit", "id"),
                "unique_together": {("unit", "student")},
            },
        ),
        migrations.CreateModel(
            name="GroupSet",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=200, verbose_name="Group set name")),
                ("unit", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="group_sets", to="unit.unit", verbose_name="Unit")),
            ],
            options={
                "verbose_name": "Group set",
                "verbose_name_plural": "Group sets",
                "ordering": ("unit", "id"),
                "unique_together": {("unit", "name")},
            },
        ),
        migrations.CreateModel(
            name="Group",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=200, verbose_name="Group name")),
                ("group_set", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="groups", to="unit.groupset", verbose_name="Group set")),
            ],
            options={
                "verbose_name": "Group",
                "verbose_name_plural": "Groups",
                "ordering": ("group_set", "id"),
                "unique_together": {("group_set", "name")},
            },
        ),
        migrations.CreateModel(
            name="GroupMembership",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("active", models.BooleanField(default=True, verbose_name="Active")),
                ("creation_time", models.DateTimeField(default=django.utils.timezone.now, verbose_name="Creation time")),
                ("last_change_time", models.DateTimeField(default=django.utils.timezone.now, verbose_name="Last change time")),
                ("group", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="memberships", to="unit.group", verbose_name="Group")),
                ("project", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="group_memberships", to="unit.project", verbose_name="Project")),
            ],
            options={
                "verbose_name": "Group membership",
                "verbose_name_plural": "Group memberships",
                "ordering": ("group", "project"),
                "unique_together": {("group", "project")},
            },
        ),
        migrations.CreateModel(
            name="TaskDefinition",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=200, verbose_name="Task name")),
                ("abbreviation", models.CharField(max_length=20, verbose_name="Abbreviation")),
                ("target_date", models.DateTimeField(blank=True, null=True, verbose_name="Target date")),
                ("group_set", models.ForeignKey(blank=True, help_text="If set, the task is completed by the groups of this group set rather than by individual students.", null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="task_definitions", to="unit.groupset", verbose_name="Group set")),
                ("unit", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="task_definitions", to="unit.unit", verbose_name="Unit")),
            ],
            options={
                "verbose_name": "Task definition",
                "verbose_name_plural": "Task definitions",
                "ordering": ("unit", "id"),
                "unique_together": {("unit", "abbreviation")},
            },
        ),
        migrations.CreateModel(
            name="GroupSubmission",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("notes", models.TextField(blank=True, verbose_name="Notes")),
                ("creation_time", models.DateTimeField(default=django.utils.timezone.now, verbose_name="Creation time")),
                ("group", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="submissions", to="unit.group", verbose_name="Group")),
                ("submitted_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="+", to="unit.project", verbose_name="Submitted by")),
                ("task_definition", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="group_submissions", to="unit.taskdefinition", verbose_name="Task definition")),
            ],
            options={
                "verbose_name": "Group submission",
                "verbose_name_plural": "Group submissions",
                "ordering": ("group", "task_definition"),
                "unique_together": {("group", "task_definition")},
            },
        ),
        migrations.CreateModel(
            name="Task",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("status", models.CharField(choices=[("not_submitted", "Not submitted"), ("working_on_it", "Working on it"), ("need_help", "Need help"), ("ready_to_mark", "Ready to mark"), ("discuss", "Discuss"), ("demonstrate", "Demonstrate"), ("fix_and_resubmit", "Fix and resubmit"), ("redo", "Redo"), ("do_not_resubmit", "Do not resubmit"), ("fail", "Fail"), ("complete", "Complete")], default="not_submitted", max_length=50, verbose_name="Status")),
                ("last_status_change_time", models.DateTimeField(blank=True, null=True, verbose_name="Last status change time")),
                ("contribution_pct", models.IntegerField(default=100, help_text="Share of the group's work attributed to this student, in percent. 100 means full individual credit.", verbose_name="Contribution percentage")),
                ("group_submission", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="tasks", to="unit.groupsubmission", verbose_name="Group submission")),
                ("project", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="tasks", to="unit.project", verbose_name="Project")),
                ("task_definition", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="tasks", to="unit.taskdefinition", verbose_name="Task definition")),
            ],
            options={
                "verbose_name": "Task",
                "verbose_name_plural": "Tasks",
                "ordering": ("project", "task_definition"),
                "unique_together": {("project", "task_definition")},
            },
        ),
        migrations.CreateModel(
            name="UnitRole",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("role", models.CharField(choices=[("convenor", "Convenor"), ("tutor", "Tutor")], max_length=50, verbose_name="Role")),
                ("unit", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="roles", to="unit.unit", verbose_name="Unit")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="unit_roles", to=settings.AUTH_USER_MODEL, verbose_name="User")),
            ],
            options={
                "verbose_name": "Unit role",
                "verbose_name_plural": "Unit roles",
                "ordering": ("unit", "role", "user"),
                "unique_together": {("unit", "user")},
            },
        ),
    ]
