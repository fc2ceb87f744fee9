import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_analyzer.nlp.normalizer import lemmatize, normalize_text  # noqa: E402


class NormalizerTests(unittest.TestCase):
    def test_empty_text_yields_no_tokens(self):
        self.assertEqual(list(normalize_text("", "en")), [])
        self.assertEqual(list(normalize_text("   \n", "fr")), [])

    def test_english_stop_words_and_suffixes(self):
        tokens = list(normalize_text("The engineers are testing APIs", "en"))
        self.assertEqual(tokens, ["engineer", "test", "api"])

    def test_french_stop_words(self):
        tokens = list(normalize_text("Le développeur et la base de données", "fr"))
        self.assertEqual(tokens, ["développeur", "base", "donnée"])

    def test_unknown_language_uses_english_stop_words(self):
        tokens = list(normalize_text("the python team", "de"))
        self.assertEqual(tokens, ["python", "team"])

    def test_skill_symbols_survive(self):
        tokens = list(normalize_text("C# and C++ with Node.js. Also .NET!", "en"))
        self.assertEqual(tokens, ["c#", "c++", "node.js", "also", ".net"])

    def test_single_characters_are_dropped(self):
        self.assertEqual(list(normalize_text("a b c go", "en")), ["go"])

    def test_normalization_is_deterministic(self):
        text = "Built scalable microservices using Kubernetes, Docker and Python."
        self.assertEqual(list(normalize_text(text, "en")), list(normalize_text(text, "en")))

    def test_lemmatize_rules(self):
        self.assertEqual(lemmatize("building"), "build")
        self.assertEqual(lemmatize("sing"), "sing")
        self.assertEqual(lemmatize("deployed"), "deploy")
        self.assertEqual(lemmatize("red"), "red")
        self.assertEqual(lemmatize("teams"), "team")
        self.assertEqual(lemmatize("aws"), "aws")
        self.assertEqual(lemmatize("node.js"), "node.js")


if __name__ == "__main__":
    unittest.main()
