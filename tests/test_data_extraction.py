import pytest

from src import data_extraction
from src.data_extraction import (
    decode_document,
    extract_text_from_pdf,
    is_pdf,
    read_document,
    read_job_description,
)
from src.errors import DecodeError, EmptyTextError


class FakePage:
    def __init__(self, text):
        self._text = text

    def extract_text(self):
        return self._text


class FakePdf:
    def __init__(self, texts):
        self.pages = [FakePage(t) for t in texts]

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


@pytest.fixture
def fake_pdf(monkeypatch):
    """Replace pdfplumber.open with a stub returning the given page texts."""
    def install(texts):
        opened = []

        def fake_open(source):
            opened.append(source)
            return FakePdf(texts)

        monkeypatch.setattr(data_extraction.pdfplumber, "open", fake_open)
        return opened

    return install


@pytest.mark.parametrize(
    "filename, content_type, expected",
    [
        ("cv.pdf", None, True),
        ("CV.PDF", "application/octet-stream", True),
        ("cv.bin", "application/pdf", True),
        ("cv.bin", "application/pdf; charset=binary", True),
        ("cv.txt", "text/plain", False),
        (None, None, False),
    ],
)
def test_is_pdf(filename, content_type, expected):
    assert is_pdf(filename, content_type) is expected


def test_plain_text_is_decoded_as_utf8():
    assert decode_document("cv.txt", "Python développeur".encode("utf-8")) == "Python développeur"


def test_invalid_utf8_is_replaced_not_raised():
    text = decode_document("cv.txt", b"Python \xff\xfe Docker")
    assert "Python" in text and "Docker" in text


@pytest.mark.parametrize("data", [b"", b"   \n\t  "])
def test_blank_text_raises_empty_text_error(data):
    with pytest.raises(EmptyTextError) as exc_info:
        decode_document("cv.txt", data)
    assert "Could not extract text" in exc_info.value.user_message


def test_corrupt_pdf_raises_decode_error():
    with pytest.raises(DecodeError) as exc_info:
        decode_document("cv.pdf", b"this is not a pdf at all", "application/pdf")
    assert exc_info.value.user_message.startswith("Failed to read PDF file")


def test_pdf_pages_are_joined(fake_pdf):
    opened = fake_pdf(["Python developer", None, "AWS Docker"])

    assert extract_text_from_pdf(b"%PDF-fake") == "Python developer\n\nAWS Docker"
    # * bytes are wrapped in a file object for pdfplumber
    assert hasattr(opened[0], "read")


def test_image_only_pdf_raises_empty_text_error(fake_pdf):
    fake_pdf([None, ""])

    with pytest.raises(EmptyTextError):
        decode_document("scan.pdf", b"%PDF-fake", "application/pdf")


def test_read_document_from_disk(tmp_path, fake_pdf):
    fake_pdf(["Kubernetes operator"])
    txt = tmp_path / "cv.txt"
    txt.write_text("Senior Python engineer", encoding="utf-8")
    pdf = tmp_path / "cv.pdf"
    pdf.write_bytes(b"%PDF-fake")

    assert read_document(txt) == "Senior Python engineer"
    assert read_document(pdf) == "Kubernetes operator"


def test_read_document_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_document(tmp_path / "nope.pdf")


def test_read_job_description(tmp_path):
    job = tmp_path / "job.txt"
    job.write_text("Python, AWS, Terraform", encoding="utf-8")

    assert read_job_description(job) == "Python, AWS, Terraform"
    with pytest.raises(FileNotFoundError):
        read_job_description(tmp_path / "missing.txt")
