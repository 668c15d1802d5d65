"""
Score one job posting with both analysis services and print JSON.

Same call path the UI uses (AnalysisService.analyze). Reads the posting
from the argument, or from stdin when the argument is "-".

Usage:
  python -m jobshield.tools.analyze_posting "Senior engineer, salary and benefits..."
  cat posting.txt | python -m jobshield.tools.analyze_posting -
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Any, Sequence

from jobshield.analysis_engine.service import AnalysisService, build_default_services
from jobshield.config.settings import get_settings
from jobshield.jobshield_logging import get_logger

logger = get_logger(__name__)


async def analyze_with_all(services: dict[str, AnalysisService], text: str) -> dict[str, Any]:
    """Return {service name: ScoreResult.to_dict()} in service order."""
    out: dict[str, Any] = {}
    for name, service in services.items():
        result = await service.analyze(text)
        out[name] = result.to_dict()
    return out


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Score a job posting with the BERT- and LSTM-flavored services.")
    parser.add_argument("text", help='Posting text, or "-" to read stdin')
    args = parser.parse_args(argv)

    text = sys.stdin.read() if args.text == "-" else args.text
    try:
        services = build_default_services(get_settings())
        results = asyncio.run(analyze_with_all(services, text))
    except Exception as e:
        logger.error("analyze_posting_failed", error=str(e), exc_info=True)
        print("ERROR:", e, file=sys.stderr)
        return 1
    print(json.dumps(results, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
