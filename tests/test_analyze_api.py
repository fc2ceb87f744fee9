import sys
import unittest
from dataclasses import replace
from pathlib import Path
from unittest.mock import patch

from fastapi.testclient import TestClient

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_analyzer.api.v1 import analyze as analyze_module  # noqa: E402
from resume_analyzer.main import app  # noqa: E402

RESUME = (
    "Jane Smith\njane@x.com\n555-111-2222\nEXPERIENCE\nSoftware Engineer | Acme Corp\n"
    "2019 - Present\nBuilt APIs with React.\nEDUCATION\nState University\nBSc Computer Science"
)
JOB = "Senior Engineer needs C# and React experience."


class AnalyzeApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def test_health(self):
        response = self.client.get("/v1/health")
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["status"], "healthy")
        self.assertIn(body["similarity_strategy"], {"fallback", "trained"})
        self.assertGreater(body["skill_terms"], 0)

    def test_analyze_json_payload(self):
        response = self.client.post(
            "/v1/analyze",
            json={"resume_text": RESUME, "job_description_text": JOB, "job_title": "Senior Engineer"},
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["extracted_name"], "Jane Smith")
        self.assertEqual(body["job_skills"], ["c#", "react"])
        self.assertEqual(body["matched_skills"], ["react"])
        self.assertEqual(body["missing_skills"], ["c#"])
        self.assertEqual(body["skill_match_percentage"], 50.0)
        self.assertIn(body["predicted_level"], {"Reject", "Junior", "Mid", "Senior"})
        self.assertEqual(body["work_experiences"][0]["company"], "Acme Corp")

    def test_analyze_rejects_invalid_payload(self):
        response = self.client.post("/v1/analyze", json={"resume_text": 12, "language": "x"})
        self.assertEqual(response.status_code, 422)

    def test_upload_text_resume(self):
        response = self.client.post(
            "/v1/analyze/upload",
            files={"resume_file": ("cv.txt", RESUME.encode("utf-8"), "text/plain")},
            data={"job_description_text": JOB, "candidate_name": "J. Smith"},
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["extracted_name"], "J. Smith")
        self.assertEqual(body["extracted_email"], "jane@x.com")
        self.assertEqual(body["resume_text"], RESUME)

    def test_upload_over_size_cap_is_rejected(self):
        small_cap = replace(analyze_module.settings, max_upload_bytes=64)
        with patch.object(analyze_module, "settings", small_cap):
            response = self.client.post(
                "/v1/analyze/upload",
                files={"resume_file": ("cv.txt", b"x" * 65, "text/plain")},
                data={"job_description_text": JOB},
            )
        self.assertEqual(response.status_code, 413)
        self.assertIn("File too large", response.json()["detail"])

    def test_upload_unsupported_type(self):
        response = self.client.post(
            "/v1/analyze/upload",
            files={"resume_file": ("cv.exe", b"MZ", "application/octet-stream")},
            data={"job_description_text": JOB},
        )
        self.assertEqual(response.status_code, 400)
        self.assertIn("Unsupported file type", response.json()["detail"])


if __name__ == "__main__":
    unittest.main()
