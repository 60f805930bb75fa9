"""Notifications app package.

Holds the per-user notification inbox and the mailer used to deliver HTML
emails. Email can be sent inline or queued to Celery, depending on the
``MAILER_ASYNC`` setting.
"""
