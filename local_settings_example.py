# See https://docs.djangoproject.com/en/dev/howto/deployment/checklist/

# {{{ database and site

SECRET_KEY = "<CHANGE ME TO SOME RANDOM STRING ONCE IN PRODUCTION>"

ALLOWED_HOSTS = [
        "groupwork.example.com",
        ]

# Uncomment this to use a real database. If left commented out, a local SQLite3
# database will be used, which is not recommended for production use.
#
# DATABASES = {
#     "default": {
#         "ENGINE": "django.db.backends.postgresql",
#         "NAME": "groupwork",
#         "USER": "groupwork",
#         "PASSWORD": "<PASSWORD>",
#         "HOST": "127.0.0.1",
#         "PORT": "5432",
#     }
# }

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = True

TIME_ZONE = "America/Chicago"

# }}}

# {{{ group work

# Declared contributions of a group submission must add up to
# 100 +/- this many percentage points.
#GROUPWORK_CONTRIBUTION_TOLERANCE = 10

# How often a transaction that fails to serialize (e.g. two students of the
# same group submitting at once on PostgreSQL) is attempted before giving up.
#GROUPWORK_TRANSACTION_MAX_TRIES = 5

# }}}

# vim: foldmethod=marker
