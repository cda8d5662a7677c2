"""Prettier configuration, install and package.json format scripts."""

from pathlib import Path
from typing import Any

from nextsetup import ui
from nextsetup.command import run_command
from nextsetup.files import file_exists, read_json, write_file, write_json
from nextsetup.settings import get_setting, merge_settings
from nextsetup.state import SetupSession
from nextsetup.steps.base import Severity, Step

PRETTIER_PACKAGES = ["prettier", "eslint-config-prettier"]
PLUGIN_PACKAGES = ["prettier-plugin-tailwindcss", "@trivago/prettier-plugin-sort-imports"]

# Order matters: Prettier loads the Tailwind plugin last.
PLUGINS = ["@trivago/prettier-plugin-sort-imports", "prettier-plugin-tailwindcss"]
IMPORT_ORDER = [
    "^(react/(.*)$)|^(react$)",
    "^(next/(.*)$)|^(next$)",
    "<THIRD_PARTY_MODULES>",
    "^@/(.*)$",
    "^[./]",
]

FORMAT_SCRIPTS = {
    "format": "prettier --write .",
    "format:check": "prettier --check .",
}

PRETTIERIGNORE_CONTENT = """# Dependencies
node_modules/
.next/
out/
build/
dist/

# Logs
npm-debug.log*
yarn-debug.log*
yarn-error.log*

# Environment variables
.env
.env.local
.env*.local

# Package manager files
package-lock.json
yarn.lock
pnpm-lock.yaml

# Build outputs
.next/
.vercel/
.turbo/

# OS files
.DS_Store
Thumbs.db

# IDE
.vscode/
.idea/
"""


def build_prettier_config(with_plugins: bool) -> dict[str, Any]:
    config: dict[str, Any] = {
        "semi": True,
        "singleQuote": False,
        "tabWidth": 2,
        "trailingComma": "es5",
        "printWidth": 80,
        "arrowParens": "always",
        "endOfLine": "lf",
        "bracketSpacing": True,
        "jsxSingleQuote": False,
        "proseWrap": "preserve",
        "quoteProps": "as-needed",
        "useTabs": False,
    }
    if with_plugins:
        config["plugins"] = list(PLUGINS)
        config["importOrder"] = list(IMPORT_ORDER)
        config["importOrderSeparation"] = True
        config["importOrderSortSpecifiers"] = True
    return config


def install_args(with_plugins: bool) -> list[str]:
    args = ["install", "-D", *PRETTIER_PACKAGES]
    if with_plugins:
        args += PLUGIN_PACKAGES
    return args


def merge_format_scripts(path: Path) -> bool:
    """Add format scripts to path/package.json, keeping everything else.

    Returns False when there is no package.json.
    """
    manifest_path = path / "package.json"
    if not file_exists(manifest_path):
        return False
    manifest = read_json(manifest_path)
    scripts = manifest.get("scripts")
    manifest["scripts"] = {**(scripts if isinstance(scripts, dict) else {}), **FORMAT_SCRIPTS}
    write_json(manifest_path, manifest)
    return True


def init(path: Path, with_plugins: bool = False, settings: dict[str, Any] | None = None) -> None:
    settings = settings or merge_settings()
    ui.info("\nSetting up Prettier configuration...\n")

    write_json(path / ".prettierrc", build_prettier_config(with_plugins))
    write_file(path / ".prettierignore", PRETTIERIGNORE_CONTENT)

    ui.warn("Installing Prettier...\n")
    run_command(get_setting(settings, "tools.npm", "npm"), install_args(with_plugins), path)

    merge_format_scripts(path)

    ui.success("\nPrettier configured successfully!\n")
    ui.dim("  Created: .prettierrc")
    ui.dim("  Created: .prettierignore")
    if with_plugins:
        ui.dim("  Installed: prettier, tailwind plugin, sort-imports plugin\n")
    else:
        ui.dim("  Installed: prettier\n")


def run_prettier_step(session: SetupSession, settings: dict[str, Any]) -> SetupSession:
    init(session.project_path, session.install_formatter_plugins, settings)
    return session


STEP = Step(name="Prettier", severity=Severity.FATAL, run=run_prettier_step)
