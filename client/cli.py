from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from app.core.config import get_settings
from app.core.logging_config import configure_logging
from client.api import GeneratedName, NameGeneratorAPIError, NameGeneratorClient
from client.usage_gate import QuotaExceededError, UsageGate, UsageStore, generate_with_quota

logger = logging.getLogger(__name__)

UPSELL_MESSAGE = "더 많은 상품명이 필요하신가요? 프리미엄 플랜으로 업그레이드하면 무제한으로 상품명을 생성할 수 있습니다."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="naming-master",
        description="Generate ten SEO product titles for Coupang / Naver Smart Store listings.",
    )
    parser.add_argument("--category", required=True, help="Product category, e.g. 식품/건강식품")
    parser.add_argument("--keywords", required=True, help="Comma-separated core keywords")
    parser.add_argument(
        "--feature",
        action="append",
        default=[],
        dest="features",
        help="Product feature or selling point (repeat up to 3 times)",
    )
    parser.add_argument("--base-url", default=None, help="Generation API base URL")
    return parser


def format_results(results: list[GeneratedName]) -> str:
    lines = []
    for rank, item in enumerate(results, start=1):
        keywords = ", ".join(item.keywords)
        lines.append(f"{rank:>2}. [{item.seo_score}] {item.name}")
        if keywords:
            lines.append(f"    키워드: {keywords}")
    return "\n".join(lines)


async def run(args: argparse.Namespace, gate: UsageGate, client: NameGeneratorClient) -> int:
    try:
        results = await generate_with_quota(
            gate,
            lambda: client.generate(args.category, args.keywords, args.features),
        )
    except QuotaExceededError as exc:
        print(exc.public_message, file=sys.stderr)
        print(UPSELL_MESSAGE, file=sys.stderr)
        return 2
    except NameGeneratorAPIError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    print(format_results(results))
    remaining = gate.remaining()
    print(f"\n오늘 남은 무료 생성 횟수: {remaining}/{gate.daily_limit}")
    if remaining <= 1:
        print(UPSELL_MESSAGE)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings)

    gate = UsageGate(
        UsageStore(Path(settings.usage_path).expanduser()),
        daily_limit=settings.daily_quota,
    )
    client = NameGeneratorClient(
        base_url=args.base_url or settings.api_base_url,
        api_prefix=settings.api_v1_prefix,
    )
    return asyncio.run(run(args, gate, client))


if __name__ == "__main__":
    sys.exit(main())
