"""Compilation database (compile_commands.json) evidence source."""

import json
import re
import shlex
from pathlib import Path
from typing import Any

from stdprobe.detector.base import BaseEvidenceSource, StandardMatch
from stdprobe.models.standard import EvidenceSource

# -std=c++20, -std=gnu++2a, /std:c++17 (MSVC)
STD_FLAG_PATTERN = re.compile(r"(?:-std=|/std:)(?:gnu|c)\+\+(\w+)")


class CompileCommandsSource(BaseEvidenceSource):
    """Reads the standard from the first record of a compilation database."""

    source = EvidenceSource.COMPILE_COMMANDS
    default_file_name = "compile_commands.json"

    def extract(self, file_path: Path) -> StandardMatch | None:
        """Extract the standard flag from the first compile command.

        Args:
            file_path: Path to compile_commands.json.

        Returns:
            Detected standard and matched flag, or None.
        """
        content = self._safe_read_file(file_path)
        if content is None:
            return None

        try:
            records = json.loads(content)
        except json.JSONDecodeError as e:
            self.logger.warning(f"Invalid JSON in {file_path}: {e}")
            return None

        command = self._first_command(records)
        if command is None:
            self.logger.debug(f"No compile command in first record of {file_path}")
            return None

        return self._match_first([STD_FLAG_PATTERN], command)

    def _first_command(self, records: Any) -> str | None:
        """Return the command line of the first database record.

        Records carry either a ``command`` string or an ``arguments`` list;
        ``command`` is preferred when both are present.
        """
        if not isinstance(records, list) or not records:
            return None

        first = records[0]
        if not isinstance(first, dict):
            return None

        command = first.get("command")
        if isinstance(command, str):
            return command

        arguments = first.get("arguments")
        if isinstance(arguments, list) and all(isinstance(a, str) for a in arguments):
            return shlex.join(arguments)

        return None
