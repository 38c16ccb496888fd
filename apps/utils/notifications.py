import logging
from smtplib import SMTPException

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.mail import EmailMessage, get_connection
from django.core.validators import validate_email
from django.utils.html import escape

from apps.core.exceptions import NotificationError

logger = logging.getLogger(__name__)

CREDENTIAL_BODY = (
    "Hi {name},<br><br>"
    "Please find your QR code attached below.<br><br>"
    "<strong>Note: Do not scan this QR code by yourself, as it is for one-time use.</strong><br><br>"
    "Thank you."
)


class EmailNotifier:
    """Deliver QR credentials by email over one shared backend connection"""

    def __init__(self, connection=None):
        self.connection = connection or get_connection(fail_silently=False)
        self._opened = False

    def send_credential(self, address, image_png, display_name):
        """Email the QR image to ``address``; raise NotificationError on failure"""
        try:
            validate_email(address)
        except ValidationError as exc:
            raise NotificationError(f"Invalid email address: {address!r}") from exc

        message = EmailMessage(
            subject=settings.QRPASS_CONFIG['mail_subject'],
            body=CREDENTIAL_BODY.format(name=escape(display_name)),
            from_email=settings.DEFAULT_FROM_EMAIL,
            to=[address],
            connection=self.connection,
        )
        message.content_subtype = 'html'
        message.attach(settings.QRPASS_CONFIG['attachment_name'], image_png, 'image/png')

        try:
            if not self._opened:
                self.connection.open()
                self._opened = True
            message.send()
        except (SMTPException, OSError) as exc:
            # A failed session is dropped so the next candidate starts a fresh one
            self.close()
            raise NotificationError(f"Failed to send QR code to {address}: {exc}") from exc

        logger.info(f"QR code emailed to {address}")

    def close(self):
        self.connection.close()
        self._opened = False
