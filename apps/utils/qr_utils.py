import hmac
import hashlib
import json
import qrcode
from io import BytesIO
from urllib.parse import quote, urlencode
from django.conf import settings

# Route of apps.scanner.views.scan_qr_code
SCAN_PATH = "/scanQrCode"


def sign_identity(identity):
	"""HMAC-SHA256 over the canonical JSON of the identity fields"""
	payload_data = json.dumps(
		[identity.name, identity.email, identity.admission_id, identity.phone_number],
		ensure_ascii=False,
	)
	secret = settings.QR_SECRET.encode()
	return hmac.new(secret, payload_data.encode(), hashlib.sha256).hexdigest()


def verify_identity_signature(identity, signature):
	"""Check a scanned signature and return (ok, reason)"""
	if not settings.QR_SECRET:
		return True, "Signing disabled"
	if not signature:
		return False, "Missing signature"

	expected_signature = sign_identity(identity)
	if not hmac.compare_digest(signature.encode(), expected_signature.encode()):
		return False, "Invalid signature"

	return True, "Valid"


def build_scan_url(identity):
	"""Build the verification link embedded in a student's QR code"""
	params = identity.as_query_params()
	if settings.QR_SECRET:
		params['signature'] = sign_identity(identity)

	base_url = settings.QRPASS_CONFIG['base_url'].rstrip('/')
	return f"{base_url}{SCAN_PATH}?{urlencode(params, quote_via=quote)}"


def generate_qr_image(payload):
	"""Generate QR code PNG bytes from payload"""
	qr = qrcode.QRCode(
		version=None,
		error_correction=qrcode.constants.ERROR_CORRECT_L,
		box_size=settings.QRPASS_CONFIG['qr_box_size'],
		border=settings.QRPASS_CONFIG['qr_border'],
	)
	qr.add_data(payload)
	qr.make(fit=True)

	img = qr.make_image(fill_color="black", back_color="white")

	buffer = BytesIO()
	img.save(buffer, format='PNG')
	return buffer.getvalue()
