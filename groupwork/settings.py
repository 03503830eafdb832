"""
Django settings for the group work service.
"""

from __future__ import annotations

# Do not change this file. All these settings can be overridden in
# local_settings.py.

import importlib.util
import os
from os.path import join


BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

_local_settings_file = join(BASE_DIR, "local_settings.py")

if os.environ.get("GROUPWORK_LOCAL_TEST_SETTINGS", None):
    # This is to make sure local_settings.py is not used for unit tests.
    assert _local_settings_file != os.environ["GROUPWORK_LOCAL_TEST_SETTINGS"]
    _local_settings_file = os.environ["GROUPWORK_LOCAL_TEST_SETTINGS"]

if not os.path.isfile(_local_settings_file):
    _local_settings_file = join(BASE_DIR, "local_settings_example.py")

_spec = importlib.util.spec_from_file_location(
        "local_settings_module", _local_settings_file)
assert _spec is not None and _spec.loader is not None
local_settings_module = importlib.util.module_from_spec(_spec)
_spec.loader.exec_module(local_settings_module)

local_settings = local_settings_module.__dict__

# {{{ django: apps

INSTALLED_APPS = (
    "django.contrib.auth",
    "django.contrib.contenttypes",

    "accounts",
    "unit",
)

# }}}

# {{{ django: auth

AUTH_USER_MODEL = "accounts.User"

# }}}

# {{{ database

# default, likely overriden by local_settings.py
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.path.join(BASE_DIR, "db.sqlite3"),
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# }}}

# {{{ internationalization

LANGUAGE_CODE = "en-us"

USE_I18N = True

USE_TZ = True

TIME_ZONE = "UTC"

LOCALE_PATHS = (
    join(BASE_DIR, "locale"),
)

# }}}

# {{{ logging

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "loggers": {
        "unit": {
            "handlers": ["console"],
            "level": "INFO",
        },
    },
}

# }}}

# {{{ app defaults

# Allowed deviation (in percentage points) of declared group contributions
# from a total of 100.
GROUPWORK_CONTRIBUTION_TOLERANCE = 10

# Attempts made for a transaction that fails to serialize.
GROUPWORK_TRANSACTION_MAX_TRIES = 5

# }}}

for name, val in local_settings.items():
    if not name.startswith("_"):
        globals()[name] = val

# vim: foldmethod=marker
