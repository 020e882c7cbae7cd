"""Rule presets for common project types.

Bare rules keep paths and ``!`` rules drop them, so every preset other
than ``generic`` must carry at least one bare rule to keep anything.
"""

from __future__ import annotations

from typing import Final

PRESETS: Final[dict[str, list[str]]] = {
    "python": [
        "**/*.py",
        "**/*.pyi",
        "**/pyproject.toml",
        "**/setup.cfg",
        "**/requirements*.txt",
        "!**/__pycache__/**",
        "!**/.venv/**",
        "!**/build/**",
        "!**/dist/**",
        "!**/*.egg-info/**",
    ],
    "node": [
        "**/*.js",
        "**/*.mjs",
        "**/*.cjs",
        "**/*.ts",
        "**/*.tsx",
        "**/package.json",
        "!**/node_modules/**",
        "!**/.next/**",
        "!**/dist/**",
        "!**/coverage/**",
    ],
    "rust": [
        "**/*.rs",
        "**/Cargo.toml",
        "**/Cargo.lock",
        "!**/target/**",
    ],
    "generic": [
        "!**/.git/**",
        "!**/.DS_Store",
        "!**/Thumbs.db",
    ],
}

# generic is always applied
_ALWAYS_APPLIED: Final[list[str]] = ["generic"]


def get_preset_patterns(name: str) -> list[str]:
    """Return rules for a named preset.

    The ``generic`` preset is always included in addition to the
    requested preset.

    Args:
        name: Preset name.

    Returns:
        list[str]: Combined rule list.

    Raises:
        ValueError: If ``name`` is not a known preset.
    """
    if name not in PRESETS:
        known = ", ".join(sorted(PRESETS))
        raise ValueError(f"Unknown preset '{name}'. Known presets: {known}")

    patterns: list[str] = []
    for always in _ALWAYS_APPLIED:
        if always != name:
            patterns.extend(PRESETS[always])
    patterns.extend(PRESETS[name])
    return patterns
