"""Fixed text templates: tag message, release title, generated notes."""

from __future__ import annotations

from cutrelease.core.config import ProductConfig


def release_title(version: str, product: ProductConfig) -> str:
    return f"{product.emoji} {version}: {product.product} for {product.shell}"


def tag_message(version: str, product: ProductConfig) -> str:
    lines = [f"🎉 Release {version}", "", product.description, ""]
    if product.features:
        lines.append("Features in this release:")
        lines.extend(f"- {feature}" for feature in product.features)
        lines.append("")
    lines.extend(product.attribution)
    return "\n".join(lines).rstrip() + "\n"


def generated_notes(version: str, product: ProductConfig) -> str:
    """Markdown release notes used when none are supplied."""
    name = product.name
    repo = product.repo_url
    lines = [
        f"## {product.emoji} {name} {version}",
        "",
        f"**{product.tagline}**",
        "",
        "### ✨ What's New",
        "",
        "- Enhanced AI integration and performance improvements",
        "- Bug fixes and stability enhancements",
        "- Updated documentation and examples",
        "",
        "### 🚀 Quick Install",
        "",
        "**Oh My Zsh:**",
        "```bash",
        f"git clone {repo} ${{ZSH_CUSTOM:-~/.oh-my-zsh/custom}}/plugins/{name}",
        f"# Add '{name}' to plugins in ~/.zshrc",
        "```",
        "",
        "**Manual:**",
        "```bash",
        f"git clone {repo} ~/.{name}",
        f"echo 'source ~/.{name}/{name}.plugin.zsh' >> ~/.zshrc",
        "```",
    ]

    if product.usage:
        lines.extend(["", "### ⌨️ Usage", ""])
        lines.extend(f"- {line}" for line in product.usage)

    if product.setup:
        lines.extend(["", "### 🔧 Setup", ""])
        lines.extend(f"{i}. {step}" for i, step in enumerate(product.setup, start=1))

    lines.extend(
        [
            "",
            "### 📖 Documentation",
            "",
            "See [README.md](README.md) for complete installation and usage instructions.",
            "",
            "---",
            f"*{product.notes_footer}*",
        ]
    )
    return "\n".join(lines) + "\n"
