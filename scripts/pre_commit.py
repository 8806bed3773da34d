"""
Git pre-commit entry point.

Install with:
    printf '#!/bin/sh\nexec forms-pre-commit\n' > .git/hooks/pre-commit
    chmod +x .git/hooks/pre-commit
"""

from core.hooks.pre_commit import PreCommitHook
from core.logging_config import setup_logging


def main() -> int:
    setup_logging()
    return PreCommitHook().run()


if __name__ == "__main__":
    raise SystemExit(main())
