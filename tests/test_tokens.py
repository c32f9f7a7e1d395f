import dataclasses
import unittest

from tokens import (
    StringToken,
    TerminatorToken,
    PipeToken,
    RedirectOutToken,
    FileDescriptorDupToken,
    SessionRedirectToken,
)


class TestTokenText(unittest.TestCase):
    def test_str_forms(self):
        self.assertEqual("hello", str(StringToken("hello")))
        self.assertEqual(";", str(TerminatorToken(";")))
        self.assertEqual("| more", str(PipeToken("more")))
        self.assertEqual("1>out.txt", str(RedirectOutToken(1, "out.txt")))
        self.assertEqual("2>>err.log", str(RedirectOutToken(2, "err.log", True)))
        self.assertEqual("2>&1", str(FileDescriptorDupToken(2, 1)))
        self.assertEqual(">+3", str(SessionRedirectToken(3)))
        self.assertEqual(">>+", str(SessionRedirectToken(None, True)))


class TestTokenValues(unittest.TestCase):
    def test_equality_ignores_source_position(self):
        self.assertEqual(StringToken("a", "a b", 0), StringToken("a", "b a", 2))

    def test_equality_uses_payload(self):
        self.assertNotEqual(RedirectOutToken(1, "x"), RedirectOutToken(1, "x", True))

    def test_tokens_are_immutable(self):
        tok = PipeToken("more", "go | more", 3)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            tok.command = "less"


if __name__ == "__main__":
    unittest.main()
