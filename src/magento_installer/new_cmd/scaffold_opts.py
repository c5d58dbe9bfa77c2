"""Options dataclass for the new command."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ScaffoldRequest:
    """Everything one `magento new` invocation asked for."""

    name: str
    version: str = ""
    force: bool = False
    sample_data: bool = False
    quiet: bool = False
    no_ansi: bool = False

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Application name must not be empty")
        if "\0" in self.name:
            raise ValueError(f"Invalid application name: {self.name!r}")

    def resolved_version(self, default_version):
        return self.version or default_version
