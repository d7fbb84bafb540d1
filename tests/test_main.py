import io
import json
import os
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

import main
from wordsearch.data.word_source import STATIC_WORDS


class MainCliTests(unittest.TestCase):
    def test_remote_without_dictionary_url_uses_builtin_words(self) -> None:
        buffer = io.StringIO()
        with patch.dict(os.environ, {}, clear=True), redirect_stdout(buffer):
            exit_code = main.main(["--remote", "--seed", "1"])

        self.assertEqual(exit_code, 0)
        payload = json.loads(buffer.getvalue())
        self.assertEqual(payload["difficulty"], "easy")
        self.assertTrue(payload["words"])
        self.assertTrue(set(w["word"] for w in payload["words"]) <= set(STATIC_WORDS))

    def test_words_flag_builds_requested_words(self) -> None:
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            exit_code = main.main(["--words", "cat", "dog", "--seed", "3"])

        self.assertEqual(exit_code, 0)
        payload = json.loads(buffer.getvalue())
        self.assertEqual(sorted(w["word"] for w in payload["words"]), ["CAT", "DOG"])
        self.assertEqual(len(payload["grid"]), payload["rows"])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
