"""Tests for cutrelease.release.templates module."""

from __future__ import annotations

from cutrelease.core.config import ProductConfig
from cutrelease.release.templates import generated_notes, release_title, tag_message


def test_release_title() -> None:
    assert release_title("v1.0.1", ProductConfig()) == "🤖 v1.0.1: Claude AI for Zsh"


def test_release_title_custom_product() -> None:
    product = ProductConfig(emoji="🐟", product="GPT", shell="Fish")
    assert release_title("v2.0.0", product) == "🐟 v2.0.0: GPT for Fish"


def test_tag_message() -> None:
    product = ProductConfig(
        description="Shell helper.",
        features=("One", "Two"),
        attribution=("Tagged-by: cutrelease",),
    )
    assert tag_message("v1.0.1", product) == (
        "🎉 Release v1.0.1\n"
        "\n"
        "Shell helper.\n"
        "\n"
        "Features in this release:\n"
        "- One\n"
        "- Two\n"
        "\n"
        "Tagged-by: cutrelease\n"
    )


def test_tag_message_without_features() -> None:
    product = ProductConfig(description="d", features=(), attribution=())
    assert tag_message("v1.0.1", product) == "🎉 Release v1.0.1\n\nd\n"


ZSH_CLAUDE_NOTES = r"""## 🤖 zsh-claude v1.0.0

**AI-powered command suggestions and explanations for Zsh using Claude AI**

### ✨ What's New

- Enhanced AI integration and performance improvements
- Bug fixes and stability enhancements
- Updated documentation and examples

### 🚀 Quick Install

**Oh My Zsh:**
```bash
git clone https://github.com/HundredAcreStudio/zsh-claude ${ZSH_CUSTOM:-~/.oh-my-zsh/custom}/plugins/zsh-claude
# Add 'zsh-claude' to plugins in ~/.zshrc
```

**Manual:**
```bash
git clone https://github.com/HundredAcreStudio/zsh-claude ~/.zsh-claude
echo 'source ~/.zsh-claude/zsh-claude.plugin.zsh' >> ~/.zshrc
```

### ⌨️ Usage

- **macOS**: Option+\ (suggest), Option+Shift+\ (explain)
- **Linux/Windows**: Alt+\ (suggest), Alt+Shift+\ (explain)

### 🔧 Setup

1. Get API key: [console.anthropic.com/settings/keys](https://console.anthropic.com/settings/keys)
2. Install dependencies: `brew install jq` (macOS) or `sudo apt install jq` (Ubuntu)
3. Configure: Run `claude-setup`

### 📖 Documentation

See [README.md](README.md) for complete installation and usage instructions.

---
*Transform natural language into executable commands with Claude AI! 🧠→⚡*
"""


def test_generated_notes_default_profile() -> None:
    assert generated_notes("v1.0.0", ProductConfig()) == ZSH_CLAUDE_NOTES


def test_generated_notes_setup_is_not_next_steps() -> None:
    notes = generated_notes("v1.0.0", ProductConfig())
    assert "Install dependencies: jq, curl" not in notes


def test_generated_notes_without_usage_or_setup() -> None:
    notes = generated_notes("v1.0.1", ProductConfig(usage=(), setup=()))
    assert "### ⌨️ Usage" not in notes
    assert "### 🔧 Setup" not in notes
    assert notes.endswith(f"---\n*{ProductConfig().notes_footer}*\n")
