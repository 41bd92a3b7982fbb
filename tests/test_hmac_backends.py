"""Unit tests for HMAC back-end probing and selection"""
import unittest
from unittest.mock import patch

from metahook.app.services.hmac_backends import (
	CryptographyBackend,
	HashlibBackend,
	probe_backends,
	select_backend,
)


class TestSelectBackend(unittest.TestCase):

	def test_auto_prefers_native(self):
		self.assertIsInstance(select_backend("auto"), HashlibBackend)

	@unittest.skipUnless(CryptographyBackend.available(), "cryptography not installed")
	def test_auto_falls_back_to_cryptography(self):
		with patch.object(HashlibBackend, "available", return_value=False):
			self.assertIsInstance(select_backend("auto"), CryptographyBackend)

	@unittest.skipUnless(CryptographyBackend.available(), "cryptography not installed")
	def test_explicit_choice(self):
		self.assertIsInstance(select_backend("cryptography"), CryptographyBackend)

	def test_explicit_choice_unavailable_is_not_replaced(self):
		with patch.object(CryptographyBackend, "available", return_value=False):
			self.assertIsNone(select_backend("cryptography"))

	def test_nothing_available(self):
		with patch.object(HashlibBackend, "available", return_value=False), \
			patch.object(CryptographyBackend, "available", return_value=False):
			self.assertIsNone(select_backend("auto"))
			self.assertEqual(probe_backends(), {"hashlib": False, "cryptography": False})


class TestDigests(unittest.IsolatedAsyncioTestCase):

	async def test_hashlib_known_digest(self):
		# RFC 4231 test case 2
		digest = await HashlibBackend().compute_hmac_sha256_hex("Jefe", b"what do ya want for nothing?")
		self.assertEqual(digest, "5bdcc146bf60754e6a042426089575c75a003f089d2739839dec58b964ec3843")

	@unittest.skipUnless(CryptographyBackend.available(), "cryptography not installed")
	async def test_cryptography_known_digest(self):
		digest = await CryptographyBackend().compute_hmac_sha256_hex("Jefe", b"what do ya want for nothing?")
		self.assertEqual(digest, "5bdcc146bf60754e6a042426089575c75a003f089d2739839dec58b964ec3843")


if __name__ == "__main__":
	unittest.main()
