from __future__ import annotations

from cutrelease.core.config import ProductConfig
from cutrelease.output.console import ConsoleProtocol


def print_summary(
    *,
    version: str,
    product: ProductConfig,
    url: str | None,
    console: ConsoleProtocol,
) -> None:
    """Print the end-of-run banner, highlights, URL and user guidance."""
    console.success(f"Release {version} created successfully! 🚀")
    console.newline()

    if product.highlights:
        console.info("🎯 What's available:")
        for i, line in enumerate(product.highlights, start=1):
            console.info(f"{i}. {line}")
        console.newline()

    if url:
        console.info(f"🌐 Release URL: {url}")
        console.newline()

    if product.next_steps:
        console.header("Next steps for users:")
        for step in product.next_steps:
            console.info(f"• {step}")
        console.newline()

    if product.farewell:
        console.info(product.farewell)
