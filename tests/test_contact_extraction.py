import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_analyzer.extraction.contact import (  # noqa: E402
    NAME_PLACEHOLDER,
    extract_city,
    extract_email,
    extract_job_title,
    extract_linkedin,
    extract_name,
    extract_phone,
    extract_profile,
    extract_summary,
    extract_website,
    first_match,
)
from resume_analyzer.schemas import ContactFields  # noqa: E402


class ContactExtractionTests(unittest.TestCase):
    def test_email_and_phone(self):
        text = "Jane Smith\njane@x.com\n555-111-2222"
        self.assertEqual(extract_email(text), "jane@x.com")
        self.assertEqual(extract_phone(text), "555-111-2222")

    def test_international_phone(self):
        self.assertEqual(extract_phone("Tel +33 6 12 34 56 78"), "+33 6 12 34 56 78")

    def test_loose_phone_fallback(self):
        self.assertEqual(extract_phone("Tel: 06.12.34.56"), "06.12.34.56")

    def test_year_range_is_not_a_phone(self):
        self.assertEqual(extract_phone("Acme Corp\n2019 - 2021"), "")

    def test_links_are_normalized(self):
        text = "in: https://fr.linkedin.com/in/jdoe/ | github.com/janedoe"
        self.assertEqual(extract_linkedin(text), "https://www.linkedin.com/in/jdoe")
        self.assertEqual(extract_website(text), "https://github.com/janedoe")
        self.assertEqual(extract_linkedin("linkedin.com/in/jane-doe"), "https://www.linkedin.com/in/jane-doe")

    def test_city_from_label(self):
        self.assertEqual(extract_city("Jane Doe\nLocation: Paris, France"), "Paris, France")
        self.assertEqual(extract_city("Jane Doe\nAdresse : Lyon"), "Lyon")

    def test_city_from_city_region_pair(self):
        self.assertEqual(extract_city("Jane Doe\nSeattle, WA\njane@x.com"), "Seattle, WA")

    def test_city_from_separated_header_line(self):
        text = "Jane Doe\nBackend Developer | Lyon | +33 6 12 34 56 78"
        self.assertEqual(extract_city(text), "Lyon")

    def test_job_title_skips_name_contact_and_headers(self):
        text = "Jane Doe\njane@x.com\nSenior Backend Developer\nEXPERIENCE"
        self.assertEqual(extract_job_title(text, "Jane Doe"), "Senior Backend Developer")
        self.assertEqual(extract_job_title("Jane Doe\nEXPERIENCE\nGardening", "Jane Doe"), "")

    def test_job_title_takes_role_segment(self):
        self.assertEqual(extract_job_title("Jane\nData Engineer | Acme", "Jane"), "Data Engineer")

    def test_name_heuristics(self):
        self.assertEqual(extract_name("jane@x.com\nJane Doe"), "Jane Doe")
        self.assertEqual(extract_name("ab"), "ab")
        self.assertEqual(extract_name(""), NAME_PLACEHOLDER)

    def test_summary_section(self):
        text = "Jane\nSummary\nBackend engineer with 5 years.\nExperience\nAcme | Dev"
        self.assertEqual(extract_summary(text), "Backend engineer with 5 years.")

    def test_first_match_takes_first_success(self):
        strategies = (lambda _: None, lambda _: "  second ", lambda _: "third")
        self.assertEqual(first_match(strategies, "ignored"), "second")
        self.assertEqual(first_match((lambda _: None,), "ignored"), "")

    def test_profile_keeps_supplied_name_and_email(self):
        text = "Jane Smith\njane@x.com\nlinkedin.com/in/jsmith"
        profile = extract_profile(text, ContactFields(name="J. Smith", email="j@corp.com", linkedin="old"))
        self.assertEqual(profile.name, "J. Smith")
        self.assertEqual(profile.email, "j@corp.com")
        self.assertEqual(profile.linkedin, "https://www.linkedin.com/in/jsmith")

    def test_profile_from_empty_text_is_all_empty(self):
        profile = extract_profile("")
        self.assertEqual(profile.name, NAME_PLACEHOLDER)
        for field in ("email", "phone", "city", "job_title", "linkedin", "website", "summary"):
            self.assertEqual(getattr(profile, field), "")


if __name__ == "__main__":
    unittest.main()
