"""
Interactive scaffolding tool for custom AEM Forms components.

Usage:
    forms-scaffold
    python -m scripts.forms_scaffolder
"""

import logging
import sys
from typing import Optional

from core.cli.prompts import Prompter, PromptCancelled
from core.exceptions import ComponentExistsError, ComponentNameError
from core.logging_config import setup_logging
from core.services.scaffolder import ComponentScaffolder, get_base_components

logger = logging.getLogger(__name__)

COLORS = {
    "reset": "\x1b[0m",
    "bright": "\x1b[1m",
    "dim": "\x1b[2m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "cyan": "\x1b[36m",
    "white": "\x1b[37m",
}
CLEAR_SCREEN = "\x1b[2J\x1b[H"


def _use_color() -> bool:
    return sys.stdout.isatty()


def colorize(text: str, *styles: str) -> str:
    """Wrap text in ANSI styles; plain text when stdout is not a terminal."""
    if not styles or not _use_color():
        return text
    return "".join(COLORS[s] for s in styles) + text + COLORS["reset"]


def log(text: str, *styles: str) -> None:
    print(colorize(text, *(styles or ("white",))))


def clear_screen() -> None:
    if _use_color():
        print(CLEAR_SCREEN, end="")


def print_banner() -> None:
    clear_screen()
    log("\n🅰️  AEM Forms Custom Component Scaffolding Tool", "cyan", "bright")
    log("🪄  This tool will help you set up all the necessary files to create a new custom component.\n", "green")
    log("🚀 Let's create a new custom component!", "cyan")


def print_summary(result) -> None:
    name = result.component_name
    js, css, json_file = result.files
    log(f"✅ Successfully created custom component '{name}'!", "green")
    log("\n📁 File structure created:", "cyan")
    log("blocks/form/", "dim")
    log("└── custom-components/", "dim")
    log(f"    └── {name}/", "dim")
    log(f"        ├── {js}", "dim")
    log(f"        ├── {css}", "dim")
    log(f"        └── {json_file}", "dim")
    log("\n✨ Next steps:", "bright")
    log(f"1. Edit {js} to implement your component logic")
    log(f"2. Add styles to {css}")
    log(f"3. Configure component properties in {json_file}")
    log("\n🎉 Enjoy customizing your component!", "green", "bright")


def run(prompter: Optional[Prompter] = None, scaffolder: Optional[ComponentScaffolder] = None) -> int:
    prompter = prompter or Prompter()
    scaffolder = scaffolder or ComponentScaffolder()
    base_components = get_base_components()

    print_banner()
    try:
        name = prompter.text(
            "⚙️  What's the name of your custom component?",
            hint="lowercase, no spaces (e.g., cancel-button, icon-checkbox)",
            validate=scaffolder.validate_name,
        )
        print("")
        base = prompter.select(
            "🪄 Which base component should this extend?",
            base_components,
            [component.name for component in base_components],
        )
        print("")
        log("✨ Summary:", "cyan", "bright")
        log(f"   Custom Component name: {colorize(name, 'green')}")
        log(f"   Base component: {colorize(base.name, 'green')}")
        if not prompter.confirm("✅ Create this custom component?", default=True):
            log("⚠️ Operation cancelled", "yellow")
            return 0
    except PromptCancelled:
        print("")
        log("⚠️ Operation cancelled by user", "yellow")
        return 0

    log("\n⚙️ Creating component structure...", "yellow")
    try:
        result = scaffolder.scaffold(name, base)
    except (ComponentExistsError, ComponentNameError) as e:
        log(f"❌ {e}", "red")
        return 1
    except Exception as e:
        logger.exception("Scaffolding failed")
        log(f"❌ Unexpected error: {e}", "red")
        return 1

    print_summary(result)
    return 0


def main() -> int:
    setup_logging()
    return run()


if __name__ == "__main__":
    raise SystemExit(main())
