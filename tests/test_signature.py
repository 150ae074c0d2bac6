import time
from unittest import TestCase

from slackwhimsy.domain.utils.signature import verify_slack_signature

from helpers import SIGNING_SECRET, sign

BODY = "token=abc&team_id=T1&command=%2Femojify&text=ship+it&response_url=https%3A%2F%2Fhooks.slack.com%2Fx"


class VerifySlackSignatureTests(TestCase):
	def setUp(self) -> None:
		self.now = 1_700_000_000
		self.timestamp = str(self.now)
		self.signature = sign(BODY, self.timestamp)

	def verify(self, timestamp=None, signature=None, body=BODY, secret=SIGNING_SECRET) -> bool:
		return verify_slack_signature(
			signing_secret=secret,
			timestamp=self.timestamp if timestamp is None else timestamp,
			signature=self.signature if signature is None else signature,
			raw_body=body,
			now=self.now,
		)

	def test_correct_signature_is_accepted(self) -> None:
		self.assertTrue(self.verify())

	def test_uses_current_time_by_default(self) -> None:
		timestamp = str(int(time.time()))
		self.assertTrue(verify_slack_signature(SIGNING_SECRET, timestamp, sign(BODY, timestamp), BODY))

	def test_missing_timestamp_or_signature_is_rejected(self) -> None:
		self.assertFalse(verify_slack_signature(SIGNING_SECRET, None, self.signature, BODY, now=self.now))
		self.assertFalse(verify_slack_signature(SIGNING_SECRET, self.timestamp, None, BODY, now=self.now))
		self.assertFalse(verify_slack_signature(SIGNING_SECRET, "", self.signature, BODY, now=self.now))

	def test_single_byte_change_in_body_is_rejected(self) -> None:
		for index in range(len(BODY)):
			flipped = BODY[:index] + chr(ord(BODY[index]) ^ 1) + BODY[index + 1:]
			self.assertFalse(self.verify(body=flipped), msg=f"body byte {index}")

	def test_single_byte_change_in_signature_is_rejected(self) -> None:
		for index in range(len(self.signature)):
			flipped = self.signature[:index] + chr(ord(self.signature[index]) ^ 1) + self.signature[index + 1:]
			self.assertFalse(self.verify(signature=flipped), msg=f"signature byte {index}")

	def test_single_byte_change_in_timestamp_is_rejected(self) -> None:
		for index in range(len(self.timestamp)):
			flipped = self.timestamp[:index] + chr(ord(self.timestamp[index]) ^ 1) + self.timestamp[index + 1:]
			self.assertFalse(self.verify(timestamp=flipped), msg=f"timestamp byte {index}")

	def test_stale_timestamp_is_rejected_even_with_valid_signature(self) -> None:
		for offset in (301, -301, 3600):
			timestamp = str(self.now - offset)
			self.assertFalse(self.verify(timestamp=timestamp, signature=sign(BODY, timestamp)))

	def test_timestamp_at_window_edge_is_accepted(self) -> None:
		timestamp = str(self.now - 300)
		self.assertTrue(self.verify(timestamp=timestamp, signature=sign(BODY, timestamp)))

	def test_non_numeric_timestamp_is_rejected(self) -> None:
		self.assertFalse(self.verify(timestamp="yesterday", signature=sign(BODY, "yesterday")))

	def test_wrong_secret_is_rejected(self) -> None:
		self.assertFalse(self.verify(secret="another-secret"))

	def test_length_mismatch_and_non_ascii_signature_return_false(self) -> None:
		self.assertFalse(self.verify(signature="v0=abc"))
		self.assertFalse(self.verify(signature="v0=" + "é" * 64))
