"""Reader and writer for simple sectioned key=value configuration files."""

from __future__ import annotations

import logging
import os

from echoctl.codes import EccsError, ErrorCode

logger = logging.getLogger(__name__)


class ConfigError(EccsError):
    """A configuration file could not be read, written or updated."""


class ConfigFile:
    """Sections of ``key=value`` lines under ``[section]`` headers.

    Sections and keys are kept in sorted order, as they are written out.
    """

    def __init__(self, path: str | os.PathLike) -> None:
        self.path = os.fspath(path)
        self._values: dict[str, dict[str, str]] = {}

    def parse(self) -> None:
        """Read the file, adding its values to those already loaded."""
        try:
            with open(self.path, encoding="utf-8") as fh:
                lines = fh.read().splitlines()
        except OSError as exc:
            raise ConfigError(
                ErrorCode.CFG_LOAD_FAILED, f"cannot open config file {self.path}: {exc}"
            ) from exc

        section = ""
        for line in lines:
            if not line:
                continue
            start, end = line.find("["), line.find("]")
            if start != -1 and end != -1:
                section = line[start + 1 : end] if end > start else line[start + 1 :]
                continue
            if not section:
                continue
            key, sep, value = line.partition("=")
            if sep:
                self._values.setdefault(section, {})[key] = value
        logger.debug("parsed config file %s: %d sections", self.path, len(self._values))

    def get(self, section: str, key: str) -> str:
        """Return the value of ``key`` in ``section``, or "" if absent."""
        return self._values.get(section, {}).get(key, "")

    def set(self, section: str, key: str, value: str) -> None:
        """Change an existing value; the section and key must already exist."""
        entries = self._values.get(section)
        if entries is None or key not in entries:
            raise ConfigError(
                ErrorCode.CFG_KEY_NOT_FOUND, f"no key {key!r} in section {section!r}"
            )
        entries[key] = value

    def write(self) -> None:
        """Write all sections back to the file."""
        try:
            with open(self.path, "w", encoding="utf-8", newline="\n") as fh:
                for name in sorted(self._values):
                    fh.write(f"[{name}]\n")
                    entries = self._values[name]
                    for key in sorted(entries):
                        fh.write(f"{key}={entries[key]}\n")
        except OSError as exc:
            raise ConfigError(
                ErrorCode.CFG_WRITE_FAILED, f"cannot write config file {self.path}: {exc}"
            ) from exc
        logger.debug("wrote config file %s", self.path)

    def sections(self) -> list[str]:
        """Return the section names in sorted order."""
        return sorted(self._values)

    def section(self, name: str) -> dict[str, str]:
        """Return a copy of a section's entries, or an empty dict."""
        entries = self._values.get(name, {})
        return {key: entries[key] for key in sorted(entries)}

    def has_section(self, name: str) -> bool:
        return name in self._values