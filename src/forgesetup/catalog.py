"""npm packages installed for the bot and for each optional feature."""

from __future__ import annotations

from collections.abc import Iterable

from forgesetup.models import Feature

CORE_PACKAGES: tuple[str, ...] = (
    "@tryforge/forgescript",
    "mongoose",
    "dotenv",
    "chalk@4.1.2",
)

# ForgeRegex is not published to the registry; npm installs it from git.
FEATURE_CATALOG: dict[Feature, tuple[str, ...]] = {
    Feature.CANVAS: ("@tryforge/forge.canvas",),
    Feature.DB: ("@tryforge/forge.db", "mongodb"),
    Feature.REGEX: ("https://github.com/xNickyDev/ForgeRegex",),
}


def resolve_packages(features: Iterable[Feature]) -> list[str]:
    """Map selected features to package identifiers.

    Output follows catalog order regardless of selection order and contains
    each identifier once.
    """
    selected = set(features)
    packages: list[str] = []
    for feature, identifiers in FEATURE_CATALOG.items():
        if feature not in selected:
            continue
        for identifier in identifiers:
            if identifier not in packages:
                packages.append(identifier)
    return packages
