#!/usr/bin/env python3
import unittest

from webhook_hub.models import SignatureContext
from webhook_hub.signature import compute_signature, verify_shared_secret, verify_signature

# HMAC de "hello" com o segredo "s3cr3t"
HELLO_SHA256 = "6b23653f08c72072554e5dfef9b72efe01fcfe724a950689e991e7bd7089eb3e"
HELLO_SHA1 = "21fbddf58a7c80f7ba7b0cd12b9783da067fd4e2"


def _flip_hex(digest, index=0):
    replacement = "0" if digest[index] != "0" else "1"
    return digest[:index] + replacement + digest[index + 1:]


class TestVerifySignature(unittest.TestCase):
    def test_sha256_reference_digest(self):
        self.assertEqual(compute_signature(b"hello", "s3cr3t", "sha256"), f"sha256={HELLO_SHA256}")
        self.assertTrue(verify_signature(b"hello", f"sha256={HELLO_SHA256}", "s3cr3t", "sha256"))

    def test_sha1_reference_digest(self):
        self.assertEqual(compute_signature("hello", "s3cr3t", "sha1"), f"sha1={HELLO_SHA1}")
        self.assertTrue(verify_signature("hello", f"sha1={HELLO_SHA1}", "s3cr3t", "sha1"))

    def test_computed_header_verifies(self):
        body = b'{"type": "deployment.ready"}'
        for algorithm in ("sha1", "sha256"):
            header = compute_signature(body, "s3cr3t", algorithm)
            self.assertTrue(verify_signature(body, header, "s3cr3t", algorithm), algorithm)

    def test_single_flipped_hex_char_fails(self):
        for index in (0, 31, 63):
            sig = f"sha256={_flip_hex(HELLO_SHA256, index)}"
            self.assertFalse(verify_signature(b"hello", sig, "s3cr3t", "sha256"), f"posição {index}")

    def test_uppercase_hex_accepted(self):
        self.assertTrue(verify_signature(b"hello", f"sha256={HELLO_SHA256.upper()}", "s3cr3t", "sha256"))

    def test_wrong_prefix_for_algorithm(self):
        self.assertFalse(verify_signature(b"hello", f"sha1={HELLO_SHA256}", "s3cr3t", "sha256"))
        self.assertFalse(verify_signature(b"hello", HELLO_SHA256, "s3cr3t", "sha256"))
        self.assertFalse(verify_signature(b"hello", f"sha256={HELLO_SHA1}", "s3cr3t", "sha1"))

    def test_length_mismatch_is_false(self):
        self.assertFalse(verify_signature(b"hello", f"sha256={HELLO_SHA256[:-2]}", "s3cr3t", "sha256"))
        self.assertFalse(verify_signature(b"hello", f"sha256={HELLO_SHA256}00", "s3cr3t", "sha256"))
        self.assertFalse(verify_signature(b"hello", "sha256=", "s3cr3t", "sha256"))

    def test_non_hex_is_false(self):
        bad = "zz" + HELLO_SHA256[2:]
        self.assertFalse(verify_signature(b"hello", f"sha256={bad}", "s3cr3t", "sha256"))

    def test_missing_inputs_are_false(self):
        self.assertFalse(verify_signature(b"", f"sha256={HELLO_SHA256}", "s3cr3t"))
        self.assertFalse(verify_signature(None, f"sha256={HELLO_SHA256}", "s3cr3t"))
        self.assertFalse(verify_signature(b"hello", None, "s3cr3t"))
        self.assertFalse(verify_signature(b"hello", f"sha256={HELLO_SHA256}", None))
        self.assertFalse(verify_signature(b"hello", f"sha256={HELLO_SHA256}", ""))

    def test_unsupported_algorithm(self):
        self.assertFalse(verify_signature(b"hello", f"md5={HELLO_SHA256}", "s3cr3t", "md5"))

    def test_wrong_secret(self):
        self.assertFalse(verify_signature(b"hello", f"sha256={HELLO_SHA256}", "outro", "sha256"))

    def test_signature_context_delegates(self):
        ctx = SignatureContext("s3cr3t", f"sha1={HELLO_SHA1}", "sha1", b"hello")
        self.assertTrue(ctx.verify())
        ctx = SignatureContext("s3cr3t", f"sha1={_flip_hex(HELLO_SHA1)}", "sha1", b"hello")
        self.assertFalse(ctx.verify())


class TestSharedSecret(unittest.TestCase):
    def test_match(self):
        self.assertTrue(verify_shared_secret("token123", "token123"))

    def test_mismatch(self):
        self.assertFalse(verify_shared_secret("wrong", "token123"))

    def test_missing(self):
        self.assertFalse(verify_shared_secret("", "token123"))
        self.assertFalse(verify_shared_secret("token123", None))


if __name__ == '__main__':
    unittest.main()
