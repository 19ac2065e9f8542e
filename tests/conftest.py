"""Pytest fixtures and shared test configuration.

Fixtures:
    - make_pdf: Builds small text PDFs in memory
    - fake_qa_service: Stand-in for the model gateway
    - async_client: HTTPX client for API testing with the gateway replaced
"""

from collections.abc import AsyncGenerator, Callable

import pytest
from httpx import ASGITransport, AsyncClient

from docqa.agent import QAError
from docqa.api.app import app
from docqa.api.qa import get_gateway
from docqa.models.schemas import QAResult


def build_pdf(pages: list[str]) -> bytes:
    """Assemble a minimal PDF with one line of Helvetica text per page.

    An empty string produces a page with an empty content stream.
    """
    page_count = len(pages)
    kids = " ".join(f"{4 + 2 * i} 0 R" for i in range(page_count))
    objects: list[bytes] = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        f"<< /Type /Pages /Kids [{kids}] /Count {page_count} >>".encode(),
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    for i, text in enumerate(pages):
        stream = f"BT /F1 12 Tf 72 720 Td ({text}) Tj ET".encode() if text else b""
        objects.append(
            (
                "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
                f"/Resources << /Font << /F1 3 0 R >> >> /Contents {5 + 2 * i} 0 R >>"
            ).encode()
        )
        objects.append(b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream")

    out = bytearray(b"%PDF-1.4\n")
    offsets: list[int] = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += f"{number} 0 obj\n".encode() + body + b"\nendobj\n"

    xref_offset = len(out)
    out += f"xref\n0 {len(objects) + 1}\n".encode()
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += f"{offset:010d} 00000 n \n".encode()
    out += (
        f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\n"
        f"startxref\n{xref_offset}\n%%EOF\n"
    ).encode()
    return bytes(out)


class FakeQAService:
    """Records questions and replies with a canned result or error."""

    def __init__(self, result: QAResult | None = None, error: QAError | None = None) -> None:
        self.result = result or QAResult(answer="A", sources=["s1"])
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def answer(self, context: str, question: str) -> QAResult:
        self.calls.append((context, question))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def make_pdf() -> Callable[[list[str]], bytes]:
    """Return the in-memory PDF builder."""
    return build_pdf


@pytest.fixture
def fake_qa_service() -> FakeQAService:
    return FakeQAService()


@pytest.fixture
async def async_client(fake_qa_service: FakeQAService) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client with the QA gateway replaced by a fake.

    Yields:
        Configured AsyncClient for making test requests.
    """
    app.dependency_overrides[get_gateway] = lambda: fake_qa_service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
