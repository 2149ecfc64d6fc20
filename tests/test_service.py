import pytest

from helpdesk.answering.service import HelpdeskService, answer
from helpdesk.config import settings
from helpdesk.exceptions import AcquisitionFailure, TooLarge, UnsupportedFormat
from helpdesk.ingestion.acquire import acquire_document_text
from helpdesk.ingestion.normalize import TextNormalizer

UNAVAILABLE = (
    "We are currently updating our program records. "
    "Please visit https://ucc.co.tz/programs for latest information."
)

PROSPECTUS = (
    "UCC PROSPECTUS 2024\n"
    "DIPLOMA PROGRAMS Diploma in Computing Duration: 2 years "
    "Requirements: Form IV certificate with four passes. Apply at the registry.\n"
)


def service_for(raw_text):
    return HelpdeskService(acquirer=lambda identifier: raw_text)


def test_answer_with_structured_details():
    reply = service_for(PROSPECTUS).answer("How long is the diploma?", "prospectus.pdf")
    assert reply == (
        "UCC Helpdesk Official Response:\n\n"
        "• Duration: 2 years\n"
        "• Requirements: Form IV certificate with four passes\n\n"
        "For complete details, please consult:\n"
        "https://ucc.co.tz/programs"
    )


def test_answer_without_keyword_uses_sentinel_excerpt():
    reply = service_for(PROSPECTUS).answer("Where is the library?", "prospectus.pdf")
    assert 'Regarding "Where is the library?", our records indicate:\n' in reply
    assert "General information about UCC programs" in reply


def test_empty_document_returns_unavailable_message():
    assert service_for("").answer("diploma duration", "prospectus.pdf") == UNAVAILABLE


def test_whitespace_only_document_is_empty():
    assert service_for(" \n\t \x00").answer("diploma", "prospectus.pdf") == UNAVAILABLE


@pytest.mark.parametrize(
    "error",
    [
        UnsupportedFormat("Only PDF files are supported"),
        TooLarge("prospectus.pdf", 6_000_000, 5_242_880),
        AcquisitionFailure("outside documents root"),
        RuntimeError("unexpected"),
    ],
)
def test_acquisition_errors_return_unavailable_message(error):
    def failing(identifier):
        raise error

    assert HelpdeskService(acquirer=failing).answer("degree", "prospectus.pdf") == UNAVAILABLE


def test_respond_propagates_acquisition_errors():
    def failing(identifier):
        raise UnsupportedFormat(identifier)

    with pytest.raises(UnsupportedFormat):
        HelpdeskService(acquirer=failing).respond("degree", "prospectus.txt")


@pytest.mark.parametrize("query", ["", "diploma", "fees", "computing fees", "??", "x" * 500])
@pytest.mark.parametrize("raw", ["", PROSPECTUS, "no headers at all"])
def test_answer_is_never_empty(query, raw):
    assert service_for(raw).answer(query, "prospectus.pdf")


def test_custom_table_and_normalizer():
    service = HelpdeskService(
        acquirer=lambda identifier: "INTRO\nHOSTELS Duration: 1 semesters",
        normalizer=TextNormalizer(steps=["collapse_whitespace", "trim"]),
        table={"hostel": "HOSTELS"},
    )
    assert "• Duration: 1 semesters" in service.answer("hostel stay", "prospectus.pdf")


def test_answer_reads_pdf_from_documents_root(make_pdf, documents_root, monkeypatch):
    make_pdf("prospectus.pdf", ["BUSINESS SCHOOL Duration: 3 years"])
    monkeypatch.setattr(settings, "documents_root", str(documents_root))
    assert "• Duration: 3 years" in answer("business degree", "prospectus.pdf")


def test_answer_unsupported_identifier(documents_root):
    service = HelpdeskService(
        acquirer=lambda identifier: acquire_document_text(identifier, root=documents_root)
    )
    assert service.answer("diploma", "prospectus.docx") == UNAVAILABLE


def test_answer_with_invalid_step_configuration(monkeypatch):
    monkeypatch.setattr(settings, "normalization_steps", ["trim", "lowercase"])
    assert answer("diploma duration", "prospectus.pdf") == UNAVAILABLE
