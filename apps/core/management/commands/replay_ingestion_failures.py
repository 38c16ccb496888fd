from django.core.management.base import BaseCommand

from apps.core.ingestion import replay_failures


class Command(BaseCommand):
    help = 'Retry emailing students whose QR code could not be delivered during ingestion'

    def handle(self, *args, **options):
        report = replay_failures()
        self.stdout.write(
            self.style.SUCCESS(f"Replayed {report.total} failures: {report.succeeded} sent, {report.failed} failed")
        )
