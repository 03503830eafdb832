#!/usr/bin/env python
from __future__ import annotations

import os
import sys


def main(argv):
    # Settings come from local_settings.py, or from the file named by
    # GROUPWORK_LOCAL_TEST_SETTINGS when that is set.
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "groupwork.settings")

    from django.core.management import execute_from_command_line
    execute_from_command_line(argv)


if __name__ == "__main__":
    main(sys.argv)
