"""Settings for development and test runs."""

DEBUG = True

ALLOWED_HOSTS = ['localhost', '127.0.0.1', '[::1]']
