"""Tests for the conversation script registry and rendering."""

import pytest

from outreach.models.call import Language
from outreach.scripts import SCRIPTS, get_script


class TestRegistry:
    def test_every_language_registered(self):
        assert set(SCRIPTS) == set(Language)

    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            SCRIPTS[Language.ENGLISH] = SCRIPTS[Language.HINDI]

    @pytest.mark.parametrize("tag", ["klingon", "", None, "fr", "hin"])
    def test_unknown_tags_fall_back_to_hindi(self, tag):
        assert get_script(tag) is SCRIPTS[Language.HINDI]

    @pytest.mark.parametrize("tag", ["english", "English", " ENGLISH "])
    def test_tag_matching_is_case_insensitive(self, tag):
        assert get_script(tag) is SCRIPTS[Language.ENGLISH]

    def test_accepts_enum(self):
        assert get_script(Language.MARATHI).language is Language.MARATHI

    def test_selection_is_deterministic(self):
        a = get_script("klingon").render("Asha", "Pune", "1-3Cr")
        b = get_script("hindi").render("Asha", "Pune", "1-3Cr")
        assert a == b


@pytest.mark.parametrize("language", list(Language))
class TestRendering:
    def test_non_empty(self, language):
        rendered = SCRIPTS[language].render("Asha", "Pune", "1-3Cr")
        assert rendered.opening.strip()
        assert rendered.instructions.strip()

    def test_customer_fields_substituted(self, language):
        rendered = SCRIPTS[language].render("Asha", "Baner", "75 Lakh")
        for text in (rendered.opening, rendered.instructions):
            assert "Asha" in text
            assert "Baner" in text
            assert "75 Lakh" in text

    def test_absent_fields_use_placeholders(self, language):
        script = SCRIPTS[language]
        rendered = script.render(None, None, None)

        assert script.name_placeholder in rendered.opening
        assert script.name_placeholder in rendered.instructions
        assert script.area_placeholder in rendered.instructions
        assert script.budget_placeholder in rendered.instructions

    def test_absent_fields_leave_no_gaps(self, language):
        rendered = SCRIPTS[language].render(None, "", None)
        for text in (rendered.opening, rendered.instructions):
            assert "None" not in text
            assert "undefined" not in text
            assert "{" not in text and "}" not in text
        assert "  " not in rendered.opening

    def test_goal_is_site_visit_via_tool(self, language):
        rendered = SCRIPTS[language].render("Asha", None, None)
        assert "schedule_appointment" in rendered.instructions
        assert "site visit" in rendered.instructions


class TestOpeningClauses:
    def test_english_mentions_area_and_budget_when_known(self):
        opening = SCRIPTS[Language.ENGLISH].render("Asha", "Pune", "1-3Cr").opening
        assert "in Pune with a budget of 1-3Cr." in opening

    def test_english_omits_unknown_clauses(self):
        opening = SCRIPTS[Language.ENGLISH].render("Asha", None, None).opening
        assert "interest in a property. I would love" in opening

    def test_hindi_placeholder_name(self):
        opening = SCRIPTS[Language.HINDI].render(None, None, None).opening
        assert "Sir ya Madam ji" in opening
