import asyncio

VALID_ANALYSIS = {
    "score": 82,
    "summary": "The candidate covers most of the backend requirements. Cloud depth is the main gap.",
    "missing_keywords": ["Kubernetes", "Terraform"],
    "formatting_issues": ["Dates are not aligned"],
    "strengths": ["Strong Python background", "Quantified achievements"],
    "recommendations": ["Add a skills section that lists AWS services"],
}


def build_pdf(lines: list[str]) -> bytes:
    """Build a one-page Helvetica PDF whose text layer holds the given lines."""
    ops = ["BT", "/F1 11 Tf", "14 TL", "72 740 Td"]
    for line in lines:
        escaped = line.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")
        ops.append(f"({escaped}) Tj T*")
    ops.append("ET")
    stream = "\n".join(ops).encode("latin-1")

    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        (
            b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
            b"/Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>"
        ),
        b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica /Encoding /WinAnsiEncoding >>",
    ]

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"
    xref_offset = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (len(objects) + 1, xref_offset)
    return bytes(out)


RESUME_LINES = [
    "Jane Doe - Senior Backend Engineer",
    "jane.doe@example.com | +1 555 010 2222 | linkedin.com/in/janedoe",
    "Experience: Acme Payments, 2019-2024",
    "Built Python and FastAPI microservices handling 2M requests per day.",
    "Reduced API latency by 38 percent through caching and query tuning.",
    "Led migration from a monolith to event-driven services on AWS.",
    "Skills: Python, FastAPI, PostgreSQL, Redis, Docker, AWS, CI/CD.",
    "Mentored four engineers and ran weekly architecture reviews.",
    "Education: BSc Computer Science, State University, 2018.",
]


class FakeAIClient:
    def __init__(self, response: str | None = None, error: Exception | None = None, delay: float = 0.0):
        self.response = response
        self.error = error
        self.delay = delay
        self.prompts: list[str] = []

    async def generate_json(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.response or ""
