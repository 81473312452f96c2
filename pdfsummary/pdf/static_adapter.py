"""Static text extractor.

Ignores the uploaded bytes and always returns the same sample text. Useful for
exercising the summarization backend without depending on PDF parsing.
"""

from typing import ClassVar

from pdfsummary.pdf.base import BasePdfExtractor


class StaticTextAdapter(BasePdfExtractor):
    """Returns a fixed sample text for every document."""

    SAMPLE_TEXT: ClassVar[str] = (
        "I'm Arjun Jadhav, a Computer Engineering graduate from the 2024 batch "
        "with a strong foundation in Data Structures and Algorithms, holding 3 "
        "star ratings on both LeetCode and CodeChef. With over 1000 problems "
        "solved across various platforms and a top 1% rank on Coding Ninjas, I "
        "actively participate in contests (LeetCode Global Rank: 864/34,172, "
        "Contest 407). On the development side, I've built full-stack "
        "applications using React, Node.js, and TypeScript, with recent projects "
        "involving AI tools, real-time chat systems using Socket.IO, and a "
        "bug-tracking dashboard using Next.js. I'm currently working at Accelya "
        "as a QA Automation Engineer and looking to transition into a full-time "
        "React or full-stack development role. I'm passionate about clean code, "
        "performance optimization, and building tools that solve real-world "
        "problems."
    )

    def __init__(self, text: str | None = None) -> None:
        self._text = text if text is not None else self.SAMPLE_TEXT

    def extract(self, pdf_bytes: bytes) -> str:
        _ = pdf_bytes
        return self._text
