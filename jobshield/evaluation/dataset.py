"""
Labeled evaluation corpus.

Label 1 = legitimate posting, 0 = suspicious or fraudulent. Order is
fixed; AUC tie handling and report order follow it.
"""

from __future__ import annotations

from dataclasses import dataclass

LEGITIMATE = 1
NOT_LEGITIMATE = 0


@dataclass(frozen=True)
class TestCase:
    """One labeled posting."""

    __test__ = False  # not a pytest class

    text: str
    label: int
    category: str

    def __post_init__(self) -> None:
        if self.label not in (LEGITIMATE, NOT_LEGITIMATE):
            raise ValueError(f"label must be 0 or 1, got {self.label!r}")


DEFAULT_TEST_CASES: tuple[TestCase, ...] = (
    TestCase(
        "Senior Software Engineer at Microsoft. Requirements: 5+ years experience with C#, .NET, Azure. Competitive salary $120k-$150k plus comprehensive benefits including health insurance, stock options, and remote work flexibility.",
        LEGITIMATE,
        "legitimate",
    ),
    TestCase(
        "Marketing Manager position. Bachelor's degree in Marketing or related field required. 3+ years experience in digital marketing. Full-time role with excellent benefits package including 401k matching and professional development opportunities.",
        LEGITIMATE,
        "legitimate",
    ),
    TestCase(
        "Data Scientist role at Amazon. PhD preferred, Master's required. Experience with Python, R, machine learning. Competitive compensation with equity package and comprehensive benefits.",
        LEGITIMATE,
        "legitimate",
    ),
    TestCase(
        "UX Designer wanted. Portfolio showcasing web and mobile design projects required. Experience with Figma, Adobe Creative Suite. Competitive salary plus equity in growing startup.",
        LEGITIMATE,
        "legitimate",
    ),
    TestCase(
        "Project Manager position. PMP certification preferred. Experience with Agile methodologies and project management tools. Excellent benefits including health, dental, and paid time off.",
        LEGITIMATE,
        "legitimate",
    ),
    TestCase(
        "Work from home opportunity! Earn $3000 weekly with no experience required. Flexible hours, easy money, start immediately. No interview needed, guaranteed income!",
        NOT_LEGITIMATE,
        "suspicious",
    ),
    TestCase(
        "URGENT: Make money fast! Easy online job paying $5000 per week. No skills needed, work from home, start today. Limited spots available!",
        NOT_LEGITIMATE,
        "suspicious",
    ),
    TestCase(
        "Quick cash opportunity! Earn $100 per hour from home. No experience required, easy money guaranteed. Start immediately with no interview.",
        NOT_LEGITIMATE,
        "suspicious",
    ),
    TestCase(
        "SCAM ALERT: Become a millionaire overnight! Work 2 hours per day from home. No skills needed, get rich quick scheme. Investment required but guaranteed returns!",
        NOT_LEGITIMATE,
        "fraudulent",
    ),
    TestCase(
        "MONEY MAKING SCAM: Easy money from home! Earn $10,000 weekly with no experience. Send money first for training materials. GUARANTEED RICHES!",
        NOT_LEGITIMATE,
        "fraudulent",
    ),
    TestCase(
        "PONZI SCHEME: Invest $1000 and earn $5000 back in one week! No work required, guaranteed profits. Join our millionaire making program today!",
        NOT_LEGITIMATE,
        "fraudulent",
    ),
    TestCase(
        "CRYPTO SCAM: Make millions trading cryptocurrency from home! No experience needed, we provide all signals. Send Bitcoin first for premium membership.",
        NOT_LEGITIMATE,
        "fraudulent",
    ),
    TestCase(
        "JOB SCAM: Work from home data entry job paying $5000/week! No experience needed. Pay $99 for training kit first. GUARANTEED EMPLOYMENT!",
        NOT_LEGITIMATE,
        "fraudulent",
    ),
)
