"""Explorer context-menu handlers for the copy and paste commands."""

import logging
import shutil
import sys
from dataclasses import dataclass

from .registry import RegistryAdapterProtocol, WinRegAdapter


logger = logging.getLogger(__name__)

COPY_VERB = "FastCopy"
PASTE_VERB = "FastPaste"

# Explorer placeholders: %1 is the clicked item, %V the folder whose background was clicked
ITEM_PLACEHOLDER = "%1"
BACKGROUND_PLACEHOLDER = "%V"

DIRECTORY_SHELL = r"HKEY_CLASSES_ROOT\Directory\shell"
BACKGROUND_SHELL = r"HKEY_CLASSES_ROOT\Directory\Background\shell"
FILE_SHELL = r"HKEY_CLASSES_ROOT\*\shell"


@dataclass(frozen=True)
class HandlerEntry:
    """One context-menu verb to register."""

    shell_key: str
    verb: str
    command: str
    placeholder: str
    no_working_directory: bool = False

    @property
    def verb_key(self) -> str:
        return f"{self.shell_key}\\{self.verb}"

    @property
    def command_key(self) -> str:
        return f"{self.verb_key}\\command"


def default_executable() -> str:
    """Command line prefix invoking fastpaste."""
    script = shutil.which("fastpaste")
    if script:
        return f'"{script}"'
    return f'"{sys.executable}" -m fastpaste'


def build_handler_entries() -> list[HandlerEntry]:
    """Context-menu verbs: copy and paste on folders, copy on files."""
    return [
        HandlerEntry(DIRECTORY_SHELL, COPY_VERB, "copy", ITEM_PLACEHOLDER),
        HandlerEntry(DIRECTORY_SHELL, PASTE_VERB, "paste", ITEM_PLACEHOLDER),
        HandlerEntry(
            BACKGROUND_SHELL, COPY_VERB, "copy", BACKGROUND_PLACEHOLDER, True
        ),
        HandlerEntry(
            BACKGROUND_SHELL, PASTE_VERB, "paste", BACKGROUND_PLACEHOLDER, True
        ),
        HandlerEntry(FILE_SHELL, COPY_VERB, "copy", ITEM_PLACEHOLDER),
    ]


def build_command_line(executable: str, entry: HandlerEntry, verbose: bool) -> str:
    """Command line stored for a verb, e.g. ``"fastpaste" -v paste "%1"``.

    Only the paste verb is made verbose; copying a path has nothing to report.
    """
    parts = [executable]
    if verbose and entry.command == "paste":
        parts.append("-v")
    parts.extend([entry.command, f'"{entry.placeholder}"'])
    return " ".join(parts)


def install_handlers(
    executable: str | None = None,
    verbose: bool = False,
    registry: RegistryAdapterProtocol | None = None,
) -> list[str]:
    """Register the context-menu handlers.

    Args:
        executable: Command prefix invoking fastpaste (default: detected)
        verbose: Make pasting from the context menu verbose
        registry: Registry adapter (default: the Windows registry)

    Returns:
        The command keys written
    """
    registry = registry or WinRegAdapter()
    executable = executable or default_executable()

    written = []
    for entry in build_handler_entries():
        registry.set_value(
            entry.command_key, "", build_command_line(executable, entry, verbose)
        )
        if entry.no_working_directory:
            registry.set_value(entry.verb_key, "NoWorkingDirectory", "")
        written.append(entry.command_key)

    logger.info("Installed %d context-menu handlers", len(written))
    return written


def uninstall_handlers(registry: RegistryAdapterProtocol | None = None) -> list[str]:
    """Remove the context-menu handlers.

    Returns:
        The verb keys that existed and were removed
    """
    registry = registry or WinRegAdapter()

    removed = []
    for entry in build_handler_entries():
        if registry.delete_tree(entry.verb_key):
            removed.append(entry.verb_key)

    logger.info("Removed %d context-menu handlers", len(removed))
    return removed
