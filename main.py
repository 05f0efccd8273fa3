#!/usr/bin/env python
"""CLI for the Nepal Tech News proxy and client."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

import httpx
import uvicorn
from pydantic import BaseModel, ValidationError, field_validator

from nepal_news.config import (
    NewsConfig,
    create_contact_submitter,
    create_news_query,
    create_proxy_app,
    get_default_config_path,
    load_config,
)
from nepal_news.contact import ContactMessage
from nepal_news.errors import ContactSubmissionError
from nepal_news.render import build_cards, section_message

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    command: str
    config: Path

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v


def serve(config: NewsConfig) -> None:
    """Run the news proxy until interrupted."""
    app = create_proxy_app(config)
    logger.info(
        f"Serving news proxy on http://{config.proxy.host}:{config.proxy.port}{config.proxy.path}"
    )
    uvicorn.run(app, host=config.proxy.host, port=config.proxy.port)


async def show_news(config: NewsConfig) -> int:
    """Fetch the news list through the proxy and print one entry per card."""
    async with httpx.AsyncClient(timeout=config.client.timeout_seconds) as client:
        query = create_news_query(config.client, client)
        state = await query.mount()
        query.teardown()

    message = section_message(state)
    if message:
        logger.info(message)

    cards = build_cards(state.result)
    for i, card in enumerate(cards, 1):
        logger.info(f"{i}. {card.title}")
        logger.info(f"   Source: {card.source_name} ({card.published_label})")
        if card.summary:
            logger.info(f"   {card.summary}")
        logger.info(f"   URL: {card.url}")
    return 1 if state.error else 0


async def send_contact(config: NewsConfig, name: str, email: str, message: str) -> int:
    try:
        contact = ContactMessage(name=name, email=email, message=message)
    except ValidationError as e:
        for err in e.errors():
            logger.error(f"{err['loc'][0]}: {err['msg']}")
        return 1

    try:
        await create_contact_submitter(config.contact).submit(contact)
    except ContactSubmissionError as e:
        logger.error(f"{e}. Please try again later or email directly.")
        return 1

    logger.info("Message sent! Thank you for reaching out.")
    return 0


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Nepal tech news proxy and reader.")
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("serve", help="Run the news proxy server")
    subparsers.add_parser("news", help="Fetch and print the latest news")
    contact_parser = subparsers.add_parser("contact", help="Send a contact message")
    contact_parser.add_argument("--name", required=True)
    contact_parser.add_argument("--email", required=True)
    contact_parser.add_argument("--message", required=True)

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    ns = parser.parse_args()
    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        args = CLIArgs(command=ns.command, config=config_path)
        config = load_config(args.config)
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        if args.command == "serve":
            serve(config)
        elif args.command == "news":
            sys.exit(asyncio.run(show_news(config)))
        else:
            sys.exit(asyncio.run(send_contact(config, ns.name, ns.email, ns.message)))
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
