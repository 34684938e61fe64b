"""
Export Configuration

Output profiles select between the two ProPresenter 6 document variants:
- pro6: newer documents, base64 RTFData payloads
- legacy: older documents, raw RTF in CDATA sections
"""

import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from loguru import logger


@dataclass(frozen=True)
class OutputProfile:
    name: str
    version_number: str
    creator_code: str
    build_number: str
    presentation_extension: str = "pro6"
    playlist_extension: str = "pro6plx"
    base64_rtf: bool = True


PRO6 = OutputProfile(
    name="pro6",
    version_number="600",
    creator_code="1349676880",
    build_number="100991749",
)

LEGACY = OutputProfile(
    name="legacy",
    version_number="500",
    creator_code="1349676880",
    build_number="1",
    base64_rtf=False,
)

PROFILES: Dict[str, OutputProfile] = {
    PRO6.name: PRO6,
    LEGACY.name: LEGACY,
}

DEFAULT_PROFILE = PRO6.name

BIBLE_TRANSLATIONS: List[str] = [
    "Lutherbibel 2017",
    "Elberfelder Bibel",
    "Hoffnung für Alle",
    "BasisBibel",
    "New International Version (NIV)",
    "King James Version (KJV)",
    "English Standard Version (ESV)",
]


def get_profile(name: str) -> OutputProfile:
    """Look up a profile by name; raises KeyError for unknown names."""
    try:
        return PROFILES[name]
    except KeyError:
        raise KeyError(
            f"Unknown output profile '{name}'. Available: {', '.join(PROFILES)}"
        ) from None


@dataclass
class ExportConfig:
    profile: OutputProfile = field(default_factory=lambda: PRO6)
    default_translation: str = BIBLE_TRANSLATIONS[0]
    ## Threads used to render presentation documents; 1 renders inline
    max_workers: int = 1
    archive_prefix: str = "ProPresenter"
    playlist_prefix: str = "Ablaufplan"

    @classmethod
    def from_env(
        cls,
        profile: Optional[str] = None,
        max_workers: Optional[int] = None,
    ) -> "ExportConfig":
        """
        Build a config from PROPRESENTER_* environment variables.

        Explicit ``profile``/``max_workers`` take precedence and the matching
        variable is then not read at all.

        Raises:
            KeyError: unknown profile name
            ValueError: PROPRESENTER_MAX_WORKERS is not an integer
        """
        if max_workers is None:
            raw = os.getenv("PROPRESENTER_MAX_WORKERS", "1")
            try:
                max_workers = int(raw)
            except ValueError:
                raise ValueError(
                    f"PROPRESENTER_MAX_WORKERS must be an integer, got '{raw}'"
                ) from None

        config = cls(
            profile=get_profile(profile or os.getenv("PROPRESENTER_PROFILE", DEFAULT_PROFILE)),
            default_translation=os.getenv(
                "PROPRESENTER_TRANSLATION", BIBLE_TRANSLATIONS[0]
            ),
            max_workers=max(1, max_workers),
        )
        logger.debug(
            f"⚙️ Export config: profile={config.profile.name}, "
            f"translation={config.default_translation}, workers={config.max_workers}"
        )
        return config
