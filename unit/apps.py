from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _

from groupwork.checks import register_startup_checks


class UnitConfig(AppConfig):
    name = "unit"
    # for translation of the name of "Unit" app displayed in admin.
    verbose_name = _("Unit module")

    default_auto_field = "django.db.models.BigAutoField"

    def ready(self):
        import unit.receivers  # noqa

        register_startup_checks()
