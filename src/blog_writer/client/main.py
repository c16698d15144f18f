"""CLI entry point for writing a post against the generation API.

Usage:
    blog-writer --type challenge --keyword "미리캔버스 부업" --context "40개 올렸는데..."
    blog-writer --type ebook --keyword "업무 인수분해 기술" --output preview.html
    blog-writer --type daily --keyword "퇴근 후 부업 루틴" --local --plain
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from blog_writer.common.config import settings
from blog_writer.common.logging import setup_logging
from blog_writer.common.models import PostType
from blog_writer.publisher import save_preview

from .api_client import GenerateClient, LocalGenerateClient
from .session import WriterSession
from .state import DisplayState

logger = setup_logging(module_name="client.main")


class _TerminalEcho:
    """Prints newly arrived text as the state grows."""

    def __init__(self, enabled: bool) -> None:
        self.enabled = enabled
        self.printed = 0

    def __call__(self, state: DisplayState) -> None:
        if not self.enabled:
            return
        if len(state.content) < self.printed:
            self.printed = 0
        new_text = state.content[self.printed:]
        if new_text:
            sys.stdout.write(new_text)
            sys.stdout.flush()
            self.printed = len(state.content)


def _print_summary(state: DisplayState) -> None:
    view = state.view()
    print("\n")
    print(f"[추출된 제목] {view.display_title}")
    print(f"[추천 키워드] {', '.join(view.keywords)}")
    if view.show_ai_suggestions:
        if view.suggestions.framework:
            print(f"[추천 프레임워크] {view.suggestions.framework}")
        if view.suggestions.improve:
            print(f"[보완 포인트] {view.suggestions.improve}")
    label = "추천 이미지 (AI 추천)" if view.images_from_ai else "추천 이미지"
    print(f"[{label}] {', '.join(view.images)}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Generate a side-hustle blog post")
    parser.add_argument(
        "--type",
        dest="post_type",
        choices=PostType.values(),
        default=PostType.CHALLENGE.value,
        help="Post type (default: challenge)",
    )
    parser.add_argument("--keyword", required=True, help="Main keyword / topic")
    parser.add_argument("--context", default="", help="My situation / experience")
    parser.add_argument(
        "--server",
        default=settings.client.server_url,
        help=f"Generation API base URL (default: {settings.client.server_url})",
    )
    parser.add_argument(
        "--local",
        action="store_true",
        help="Call the LLM provider directly instead of the API server",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Write an HTML preview of the result to this path",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Print the finished post as plain text instead of streaming raw HTML",
    )

    args = parser.parse_args(argv)

    client = LocalGenerateClient() if args.local else GenerateClient(server_url=args.server)
    echo = _TerminalEcho(enabled=not args.plain)
    session = WriterSession(client, on_change=echo, confirmation_seconds=0)
    session.update_input(post_type=args.post_type, keyword=args.keyword, context=args.context)

    state = session.generate()

    if state.error:
        if state.has_content:
            print()
        print(f"오류: {state.error}", file=sys.stderr)
        if not state.has_content:
            return 1

    if args.plain:
        print(session.copy_content())

    _print_summary(state)

    if args.output:
        path = save_preview(state.view(), args.output)
        print(f"\nPreview written: {path}")

    return 1 if state.error else 0


if __name__ == "__main__":
    sys.exit(main())
