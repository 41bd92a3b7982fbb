"""HMAC-SHA-256 back-ends.

Each back-end exposes the same awaitable ``compute_hmac_sha256_hex``; callers
never see which primitive produced the digest. The native ``hashlib`` back-end
is preferred, the ``cryptography`` back-end is the fallback and computes off
the event loop.
"""
import asyncio
import hashlib
import hmac
from typing import Dict, List, Optional

try:
	from cryptography.hazmat.primitives import hashes
	from cryptography.hazmat.primitives import hmac as crypto_hmac
except ImportError:  # probed at startup, see CryptographyBackend.available
	hashes = None
	crypto_hmac = None


class HmacBackend:
	name = "base"

	@classmethod
	def available(cls) -> bool:
		raise NotImplementedError

	async def compute_hmac_sha256_hex(self, secret: str, data: bytes) -> str:
		raise NotImplementedError


class HashlibBackend(HmacBackend):
	name = "hashlib"

	@classmethod
	def available(cls) -> bool:
		return "sha256" in hashlib.algorithms_available

	async def compute_hmac_sha256_hex(self, secret: str, data: bytes) -> str:
		return hmac.new(secret.encode("utf-8"), data, hashlib.sha256).hexdigest()


class CryptographyBackend(HmacBackend):
	name = "cryptography"

	@classmethod
	def available(cls) -> bool:
		return crypto_hmac is not None

	async def compute_hmac_sha256_hex(self, secret: str, data: bytes) -> str:
		return await asyncio.to_thread(self._digest, secret.encode("utf-8"), data)

	@staticmethod
	def _digest(key: bytes, data: bytes) -> str:
		mac = crypto_hmac.HMAC(key, hashes.SHA256())
		mac.update(data)
		return mac.finalize().hex()


# Probe order for "auto": native first
BACKENDS: List[type] = [HashlibBackend, CryptographyBackend]


def probe_backends() -> Dict[str, bool]:
	return {backend.name: backend.available() for backend in BACKENDS}


def select_backend(preference: str = "auto") -> Optional[HmacBackend]:
	"""Return the back-end to use, or None when nothing usable is present.

	``preference`` is ``"auto"`` or a back-end name. An explicit name that is
	not available is not silently replaced by another back-end.
	"""
	for backend in BACKENDS:
		if preference not in ("auto", backend.name):
			continue
		if backend.available():
			return backend()
	return None
