from django.conf import settings
from django.contrib.staticfiles.management.commands.runserver import Command as StaticRunserverCommand


class Command(StaticRunserverCommand):
    """runserver that listens on the configured PORT by default"""

    default_port = str(settings.PORT)
