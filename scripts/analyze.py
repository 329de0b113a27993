"""Run a single wallet / collection / NFT analysis from the terminal.

Posts to the same backend endpoints as the web UI and prints the result.

Usage:
    python scripts/analyze.py wallet 0x742d35Cc6634C0532925a3b8D4C0C3c6c8C8C6C6
    python scripts/analyze.py nft 0xBC4CA0EdA7647A8aB7C2061c2E118A18a936f13D --token-id 1
    python scripts/analyze.py collection 0xBC4C... --json
"""

import argparse
import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from config.settings import settings  # noqa: E402
from src.analyzer.client import AnalyzerClient  # noqa: E402
from src.analyzer.exceptions import AnalyzerError  # noqa: E402
from src.analyzer.models import AnalysisType  # noqa: E402
from src.utils.logger import setup_logger  # noqa: E402
from src.views.text import format_outcome  # noqa: E402


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Web3 risk analysis")
    parser.add_argument("type", choices=[t.value for t in AnalysisType])
    parser.add_argument("address")
    parser.add_argument("--token-id", default="", help="NFT token id (nft only)")
    parser.add_argument("--api-url", default=settings.analyzer_api_url)
    parser.add_argument("--json", action="store_true", help="Print the raw result as JSON")
    return parser


async def run(args: argparse.Namespace) -> int:
    client = AnalyzerClient(args.api_url, timeout=settings.analyzer_timeout_sec)
    try:
        outcome = await client.analyze(AnalysisType(args.type), args.address, args.token_id)
    except AnalyzerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        await client.close()

    if args.json:
        print(outcome.result.model_dump_json(indent=2, exclude_none=True))
    else:
        print(format_outcome(outcome))
    return 0


def main() -> None:
    args = build_parser().parse_args()
    setup_logger("cli", level="WARNING", log_dir=None)
    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
