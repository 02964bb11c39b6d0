"""
Tests for the end-to-end CV parser
"""
import pytest

from cvparser.core.exceptions import CorruptedPDFError, CVErrorCode, InsufficientDataError
from cvparser.cv.parser import CVParser, is_current_marker, match_date_range
from tests.conftest import static_extractor


def failing_extractor(content: bytes) -> str:
    raise ValueError("broken xref table")


class TestParse:

    def test_parses_sample_cv(self, sample_cv):
        parser = CVParser(extractor=static_extractor(sample_cv))

        parsed = parser.parse(b"%PDF-1.4")

        assert parsed.skills == ["JavaScript", "TypeScript", "React", "Node.js", "Python"]

        assert len(parsed.work_history) == 2
        senior, developer = parsed.work_history
        assert senior.company == "Tech Company"
        assert senior.role == "Senior Software Engineer"
        assert senior.current is True
        assert "Microservices" in senior.badges
        assert developer.company == "Startup Inc"
        assert developer.end_date == "December 2019"
        assert "REST" in developer.badges
        assert "CI/CD" in developer.badges

        [degree] = parsed.education
        assert degree.degree == "Bachelor of Science in Computer Science"
        assert degree.field == "Computer Science"

        assert parsed.sections_found() == 3

    def test_short_text_is_insufficient(self):
        parser = CVParser(extractor=static_extractor("x" * 50))

        with pytest.raises(InsufficientDataError) as exc_info:
            parser.parse(b"%PDF")

        assert exc_info.value.code == CVErrorCode.INSUFFICIENT_DATA
        assert exc_info.value.details == {"text_length": 50, "min_text_length": 100}

    def test_minimum_length_boundary(self, parser):
        with pytest.raises(InsufficientDataError):
            parser.parse_text("a" * 99)

        parsed = parser.parse_text("a" * 100)
        assert parsed.skills == []
        assert parsed.work_history == []
        assert parsed.education == []
        assert parsed.sections_found() == 0

    def test_extraction_errors_propagate(self):
        parser = CVParser(extractor=failing_extractor)

        with pytest.raises(CorruptedPDFError):
            parser.parse(b"%PDF")

    def test_parse_is_repeatable_apart_from_ids(self, parser, sample_cv):
        first = parser.parse_text(sample_cv).model_dump(
            exclude={"work_history": {"__all__": {"id"}}, "education": {"__all__": {"id"}}}
        )
        second = parser.parse_text(sample_cv).model_dump(
            exclude={"work_history": {"__all__": {"id"}}, "education": {"__all__": {"id"}}}
        )

        assert first == second

    def test_camel_case_serialization(self, parser, sample_cv):
        data = parser.parse_text(sample_cv).model_dump(by_alias=True)

        assert set(data) == {"skills", "workHistory", "education"}
        entry = data["workHistory"][0]
        assert {"startDate", "endDate", "current", "badges"} <= set(entry)
        assert entry["endDate"] is None


class TestDateHelpers:

    @pytest.mark.parametrize(
        "line,start,end",
        [
            ("June 2022 - Present", "June 2022", "Present"),
            ("01/2020 - 03/2021", "01/2020", "03/2021"),
            ("2016 - 2019", "2016", "2019"),
        ],
    )
    def test_match_date_range(self, line, start, end):
        match = match_date_range(line)

        assert match.group(1) == start
        assert match.group(2) == end

    def test_no_date_range(self):
        assert match_date_range("Senior Engineer at Tech Corp") is None
        assert match_date_range("Graduated 2014") is None

    @pytest.mark.parametrize(
        "marker,expected",
        [
            ("Present", True),
            ("CURRENT", True),
            ("now", True),
            ("P R E S E N T", True),
            ("December 2021", False),
            ("", False),
        ],
    )
    def test_is_current_marker(self, marker, expected):
        assert is_current_marker(marker) is expected
