"""
Pre-commit hook: lint, rebuild JSON from staged partials, refresh mappings.
"""

import logging
import re
import shlex
import subprocess
from typing import Callable, List, Optional, Sequence

from core.config import Settings, settings as default_settings
from core.exceptions import CommandError
from core.schemas.components import CommandResult
from core.services.mapping_sync import sync_mappings

logger = logging.getLogger(__name__)

PARTIAL_JSON_PATTERN = re.compile(r"(^|/)_.*\.json")


def run_command(command: Sequence[str], cwd=None) -> CommandResult:
    """Run a command and raise CommandError on a non-zero exit."""
    display = " ".join(command)
    logger.debug(f"Running: {display}")
    try:
        completed = subprocess.run(list(command), capture_output=True, text=True, cwd=cwd)
    except OSError as e:
        raise CommandError(display, 127, stderr=str(e)) from e

    result = CommandResult(
        command=display,
        returncode=completed.returncode,
        stdout=completed.stdout or "",
        stderr=completed.stderr or "",
    )
    if not result.ok:
        raise CommandError(display, result.returncode, result.stdout, result.stderr)
    return result


class PreCommitHook:
    def __init__(self, settings: Optional[Settings] = None, runner: Callable[..., CommandResult] = run_command):
        self.settings = settings or default_settings
        self._runner = runner

    def _run(self, command: Sequence[str]) -> CommandResult:
        return self._runner(list(command), cwd=str(self.settings.PROJECT_ROOT))

    def staged_files(self) -> List[str]:
        result = self._run(["git", "diff", "--cached", "--name-only", "--diff-filter=ACMR"])
        return [line for line in result.stdout.split("\n") if line]

    def git_add(self, paths: Sequence[str]) -> None:
        self._run(["git", "add", *paths])

    @staticmethod
    def modified_partials(files: Sequence[str]) -> List[str]:
        return [f for f in files if PARTIAL_JSON_PATTERN.search(f)]

    def component_changes(self, files: Sequence[str]) -> List[str]:
        block = self.settings.FORM_BLOCK_DIR.strip("/")
        folders = (
            f"{block}/{self.settings.CUSTOM_COMPONENTS_DIR}/",
            f"{block}/{self.settings.OOTB_COMPONENTS_DIR}/",
        )
        mappings = self.settings.mappings_relpath
        return [f for f in files if f.startswith(folders) or f == mappings]

    def lint(self) -> bool:
        print("⏳ Running linting...")
        try:
            self._run(shlex.split(self.settings.LINT_COMMAND))
        except CommandError as e:
            print("❌ Linting failed:")
            print(e.stdout or e.stderr or str(e))
            print("\n🔧 Please fix the linting errors before committing.")
            return False
        print("✅ Linting passed - no issues found")
        return True

    def build_json(self) -> None:
        print("⏳ Building JSON files...")
        result = self._run(shlex.split(self.settings.BUILD_JSON_COMMAND))
        print("✅ JSON files built successfully")
        if result.stdout:
            print(result.stdout)
        self.git_add(self.settings.GENERATED_JSON_FILES)

    def update_mappings(self) -> bool:
        print("⏳ Updating component mappings...")
        if not sync_mappings(self.settings):
            logger.warning("Component mappings were not updated")
            print("⚠️ Component mappings were not updated")
            return False
        print("✅ Component mappings updated")
        self.git_add([self.settings.mappings_relpath])
        return True

    def run(self) -> int:
        """Returns the process exit code: 1 blocks the commit."""
        try:
            files = self.staged_files()
            if not self.lint():
                return 1

            partials = self.modified_partials(files)
            if partials:
                logger.info(f"{len(partials)} partial(s) staged, rebuilding JSON")
                self.build_json()

            changes = self.component_changes(files)
            if changes:
                logger.info(f"{len(changes)} component path(s) staged, updating mappings")
                self.update_mappings()
        except CommandError as e:
            logger.error(str(e))
            print(f"❌ {e}")
            output = e.stderr or e.stdout
            if output:
                print(output)
            return 1
        return 0
