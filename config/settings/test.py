"""Test settings for Home Rental project.

File-backed SQLite, in-memory outbox and eager Celery so the suite needs no services.
"""

import os
import tempfile

from .base import *  # noqa: F401,F403

DEBUG = False

SECRET_KEY = 'test-secret-key'

# File-backed so threads in concurrency tests share one database
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': os.path.join(tempfile.gettempdir(), 'home_rental.sqlite3'),
        'TEST': {
            'NAME': os.path.join(tempfile.gettempdir(), 'home_rental_test.sqlite3'),
        },
    }
}

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

MAILER_TRANSPORT = 'locmem'
EMAIL_BACKEND = EMAIL_BACKENDS['locmem']  # noqa: F405
MAILER_ASYNC = False

STORAGES = {
    'default': {'BACKEND': 'django.core.files.storage.FileSystemStorage'},
    'staticfiles': {'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage'},
}

CELERY_TASK_ALWAYS_EAGER = True
CELERY_TASK_EAGER_PROPAGATES = True
CELERY_BROKER_URL = 'memory://'
CELERY_RESULT_BACKEND = 'cache+memory://'
