import hmac
from typing import Mapping, Optional

from ..schemas import VerificationResult
from .hmac_backends import HmacBackend


SIGNATURE_HEADERS = ("x-hub-signature-256", "x-hub-signature")
SIGNATURE_PREFIX = "sha256="


def extract_signature(headers: Mapping[str, str]) -> Optional[str]:
	"""Return the signature header value, preferring the SHA-256 header.

	``headers`` should be case-insensitive (Starlette ``Headers``) or already
	lower-cased.
	"""
	for name in SIGNATURE_HEADERS:
		value = headers.get(name)
		if value:
			return value
	return None


class SignatureVerifier:
	"""Checks Meta ``X-Hub-Signature-256`` values against the raw request body.

	Holds no per-request state, so one instance serves every request.
	"""

	def __init__(self, secret: Optional[str], backend: Optional[HmacBackend]) -> None:
		self.secret = secret
		self.backend = backend

	async def expected_signature(self, body: bytes) -> str:
		digest = await self.backend.compute_hmac_sha256_hex(self.secret, body)
		return f"{SIGNATURE_PREFIX}{digest}"

	async def verify(self, body: bytes, signature: Optional[str]) -> VerificationResult:
		if not self.secret:
			return VerificationResult.rejected("secret not configured")
		if not signature:
			return VerificationResult.rejected("missing signature header")
		if self.backend is None:
			return VerificationResult.rejected("no HMAC capability available")

		try:
			expected = (await self.expected_signature(body or b"")).encode("utf-8")
		except Exception as exc:
			return VerificationResult.rejected(f"{self.backend.name} error: {exc}")

		received = str(signature).encode("utf-8")
		# Lengths are fixed by the algorithm; only equal lengths reach compare_digest
		if len(expected) != len(received):
			return VerificationResult.rejected("length mismatch")
		if hmac.compare_digest(expected, received):
			return VerificationResult.ok()
		return VerificationResult.rejected("mismatch")

	async def verify_headers(self, body: bytes, headers: Mapping[str, str]) -> VerificationResult:
		return await self.verify(body, extract_signature(headers))
