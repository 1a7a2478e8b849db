import atexit
import logging

from django.apps import AppConfig

logger = logging.getLogger("django")


class ContactConfig(AppConfig):
    name = "contact"

    def ready(self):
        from contact.appender import stop_appenders

        # Drain pending submissions before the interpreter goes away.
        atexit.register(stop_appenders)
        logger.debug("Contact application ready, submission writers stop at exit.")
