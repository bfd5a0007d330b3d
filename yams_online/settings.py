"""
Django settings for yams_online project.

Values are read from the environment; a ``.env`` file next to manage.py is
loaded first when present.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / '.env')

SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY') or 'django-insecure-yams-development-key'

DEBUG = os.environ.get('DJANGO_DEBUG', 'false').lower() in ('1', 'true', 'yes')

ALLOWED_HOSTS = [host for host in os.environ.get('DJANGO_ALLOWED_HOSTS', 'localhost,127.0.0.1').split(',') if host]

INSTALLED_APPS = [
    'game',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
]

ROOT_URLCONF = 'yams_online.urls'

WSGI_APPLICATION = 'yams_online.wsgi.application'
ASGI_APPLICATION = 'yams_online.asgi.application'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': os.environ.get('YAMS_DATABASE_PATH') or BASE_DIR / 'db.sqlite3',
    }
}

# "database" keeps games in the GameRecord table, "memory" in the server process
YAMS_GAME_REPOSITORY = os.environ.get('YAMS_GAME_REPOSITORY', 'database')

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = False
USE_TZ = True

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

YAMS_LOG_LEVEL = os.environ.get('YAMS_LOG_LEVEL', 'INFO').upper()
YAMS_ERROR_LOG = os.environ.get('YAMS_ERROR_LOG')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(asctime)s %(levelname)s %(name)s: %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'loggers': {
        'game': {
            'handlers': ['console'],
            'level': YAMS_LOG_LEVEL,
            'propagate': False,
        },
    },
}

if YAMS_ERROR_LOG:
    LOGGING['handlers']['error_file'] = {
        'class': 'logging.FileHandler',
        'filename': YAMS_ERROR_LOG,
        'level': 'ERROR',
        'formatter': 'simple',
    }
    LOGGING['loggers']['game']['handlers'].append('error_file')
