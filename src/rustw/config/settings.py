"""Settings for the rustw web frontend.

Options are read from ``rustw.toml``; any option the file leaves out keeps
its default.
"""

from pydantic import Field

from .kinds import UnsignedInt
from .schema import ConfigModel

CONFIG_FILE_NAME = "rustw.toml"


class RustwConfig(ConfigModel):
    """Configuration for rustw."""

    # Build
    build_command: str = Field(
        default="cargo build",
        description="command to call to build",
    )

    edit_command: str = Field(
        default="",
        description="command to call to edit; can use $file, $line, and $col.",
    )

    # Server
    port: UnsignedInt = Field(
        default=7878,
        description="port to run rustw on",
    )

    demo_mode: bool = Field(
        default=False,
        description="run in demo mode",
    )

    demo_mode_root_path: str = Field(
        default="",
        description="path to use in URLs in demo mode",
    )

    # Display
    context_lines: UnsignedInt = Field(
        default=2,
        description="lines of context to show before and after code snippets",
    )

    build_on_load: bool = Field(
        default=True,
        description="build on page load and refresh",
    )

    source_directory: str = Field(
        default="src",
        description="root of the source directory",
    )

    save_analysis: bool = Field(
        default=False,
        description="whether to run the save_analysis pass",
    )


def default_config() -> RustwConfig:
    """Get the configuration with every option at its default."""
    return RustwConfig.default()


def load_config(text: str) -> RustwConfig:
    """Load a rustw.toml document on top of the defaults.

    Args:
        text: Contents of the config file.

    Returns:
        The effective configuration.

    Raises:
        ParseError: If the document is malformed or has invalid values.
    """
    return RustwConfig.from_toml(text)


def config_docs() -> str:
    """Get the documentation for every rustw option."""
    return RustwConfig.get_docs()
