from __future__ import annotations

from cutrelease.core.config import ProductConfig
from cutrelease.output.console import MockConsole, Style
from cutrelease.release.report import print_summary


def test_summary_lists_everything() -> None:
    console = MockConsole()

    print_summary(
        version="v1.0.1",
        product=ProductConfig(),
        url="https://example.test/v1.0.1",
        console=console,
    )

    assert console.messages[0] == "OK Release v1.0.1 created successfully! 🚀"
    assert console.find("🎯 What's available:")
    assert console.find("🌐 Release URL: https://example.test/v1.0.1")
    assert console.count(Style.HEADER) == 1
    assert console.messages[-1] == "info: 🎉 Happy commanding with Claude AI!"


def test_summary_without_url_or_extras() -> None:
    console = MockConsole()
    product = ProductConfig(highlights=(), next_steps=(), farewell="bye")

    print_summary(version="v1.0.1", product=product, url=None, console=console)

    assert not console.find("Release URL")
    assert not console.find("What's available")
    assert console.count(Style.HEADER) == 0
    assert console.messages[-1] == "info: bye"
