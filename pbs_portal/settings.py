# pbs_portal/settings.py
from pathlib import Path
import os

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'demo-secret-key-change-me')
DEBUG = os.environ.get('DJANGO_DEBUG', '1') in {'1', 'true', 'True'}
ALLOWED_HOSTS = ['127.0.0.1', 'localhost', 'testserver']

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    # Projekt-Apps
    'core.apps.CoreConfig',
    'people.apps.PeopleConfig',
    'groups.apps.GroupsConfig',
    'events.apps.EventsConfig',
    'invoices.apps.InvoicesConfig',
    'census.apps.CensusConfig',
    'monitoring.apps.MonitoringConfig',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.locale.LocaleMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'pbs_portal.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [BASE_DIR / 'pbs_portal' / 'templates'],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.template.context_processors.i18n',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
                'pbs_portal.context_processors.branding',
            ],
        },
    },
]

WSGI_APPLICATION = 'pbs_portal.wsgi.application'
ASGI_APPLICATION = 'pbs_portal.asgi.application'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'db.sqlite3',
    }
}

AUTH_PASSWORD_VALIDATORS = [
    {'NAME': 'django.contrib.auth.password_validation.UserAttributeSimilarityValidator'},
    {'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator'},
    {'NAME': 'django.contrib.auth.password_validation.CommonPasswordValidator'},
    {'NAME': 'django.contrib.auth.password_validation.NumericPasswordValidator'},
]

LANGUAGE_CODE = 'de'
LANGUAGES = [
    ('de', 'Deutsch'),
    ('fr', 'Français'),
    ('it', 'Italiano'),
]
TIME_ZONE = 'Europe/Zurich'
USE_I18N = True
USE_TZ = True

STATIC_URL = 'static/'

MEDIA_URL = '/media/'
MEDIA_ROOT = BASE_DIR / 'media'

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

LOGIN_URL = 'login'
LOGIN_REDIRECT_URL = '/'
LOGOUT_REDIRECT_URL = '/'

CSRF_TRUSTED_ORIGINS = ['http://127.0.0.1:8000', 'http://localhost:8000']
CSRF_COOKIE_HTTPONLY = True
SESSION_COOKIE_HTTPONLY = True
SECURE_CONTENT_TYPE_NOSNIFF = True
X_FRAME_OPTIONS = 'DENY'

EMAIL_BACKEND = os.environ.get(
    'DJANGO_EMAIL_BACKEND',
    'django.core.mail.backends.console.EmailBackend',
)
DEFAULT_FROM_EMAIL = os.environ.get('PBS_DEFAULT_FROM_EMAIL', 'noreply@pbs.example.ch')

# Adresse, an welche eingereichte Lager zusätzlich gemeldet werden
PBS_CAMP_SUBMIT_EMAIL = os.environ.get('PBS_CAMP_SUBMIT_EMAIL', '')
PBS_CENSUS_REMINDER_FROM = os.environ.get('PBS_CENSUS_REMINDER_FROM', DEFAULT_FROM_EMAIL)

# Mindestlänge der Suche für provisorische Teilnahmen
PBS_TENTATIVE_QUERY_MIN_LENGTH = int(os.environ.get('PBS_TENTATIVE_QUERY_MIN_LENGTH', '3'))

ORGANISATION_NAME = os.environ.get('PBS_ORGANISATION_NAME', 'Pfadibewegung Schweiz')
ORGANISATION_LOGO_URL = os.getenv('PBS_ORGANISATION_LOGO_URL')

# Verzeichnis des HTML-Journals (monitoring)
PBS_LOG_DIR = Path(os.environ.get('PBS_LOG_DIR', BASE_DIR / 'logs'))
