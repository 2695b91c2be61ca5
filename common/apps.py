from django.apps import AppConfig
import logging
import os
import sys

logger = logging.getLogger(__name__)

# Commands that must never start the monthly rent job
NO_SCHEDULER_COMMANDS = ['migrate', 'makemigrations', 'test', 'collectstatic', 'shell', 'generate_monthly_rent']


class CommonConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'common'

    def ready(self):
        """
        Start the background scheduler in the serving process only.
        The autoreloader parent, migrations and tests never run it.
        """
        from django.conf import settings

        if not getattr(settings, 'ENABLE_BACKGROUND_SCHEDULER', False):
            return
        if os.environ.get('RUN_MAIN') != 'true':
            return
        if len(sys.argv) > 1 and sys.argv[1] in NO_SCHEDULER_COMMANDS:
            return

        from .scheduler import start_scheduler
        start_scheduler()
        logger.info("Background task scheduler initialized")
