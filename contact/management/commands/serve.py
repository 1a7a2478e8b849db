import logging

from django.conf import settings
from django.core.management.commands.runserver import Command as RunserverCommand

logger = logging.getLogger("django")


class Command(RunserverCommand):
    help = "Start the web server on the configured host and port"

    def add_arguments(self, parser):
        super().add_arguments(parser)
        parser.add_argument(
            "--port",
            type=int,
            help="Port to listen on (defaults to the PORT setting)",
        )
        parser.add_argument(
            "--host",
            help="Address to bind (defaults to the HOST setting)",
        )

    def handle(self, *args, **options):
        if not options["addrport"]:
            port = options["port"] or settings.PORT
            host = options["host"] or settings.HOST
            options["addrport"] = f"{host}:{port}"
        super().handle(*args, **options)

    def on_bind(self, server_port):
        # Runs in the serving process once the socket is bound.
        super().on_bind(server_port)
        logger.info(f"Server listening on port {server_port}")
        self.stdout.write(self.style.SUCCESS(f"Server listening on port {server_port}"))
