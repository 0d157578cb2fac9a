"""Emoji catalog used by the commit menu."""
from pathlib import Path
from typing import Iterable, List, Optional

import tomli

from .errors import ConfigurationError

DEFAULT_LABELS = [
    "🎨 :art: Improve structure/format",
    "⚡  :zap: Improve performance",
    "🔥 :fire: Remove code or files",
    "🐛 :bug: Fix a bug",
    "🚑️ :ambulance: Critical hotfix",
    "✨ :sparkles: Introduce new features",
    "📝 :memo: Add or update documentation",
    "🚀 :rocket: Deploy or release something",
    "💄 :lipstick: Add or update UI/style files",
    "🎉 :tada: Initial commit",
    "✅ :white_check_mark: Add, update, or pass tests",
    "🔒 :lock: Fix or improve security issues",
    "🔐 :closed_lock_with_key: Add or update secrets",
    "🔖 :bookmark: Release or version tags",
    "🚨 :rotating_light: Fix compiler/linter warnings",
    "🚧 :construction: Work in progress",
    "💚 :green_heart: Fix CI build",
    "⬇️ :arrow_down: Downgrade dependencies",
    "⬆️ :arrow_up: Upgrade dependencies",
    "📌 :pushpin: Pin dependencies to specific versions",
    "👷 :construction_worker: Add or update CI/CD build system",
    "📈 :chart_with_upwards_trend: Add or update analytics/tracking code",
    "♻️ :recycle: Refactor code",
    "➕ :heavy_plus_sign: Add a dependency",
    "➖ :heavy_minus_sign: Remove a dependency",
    "🔧 :wrench: Add or update configuration files",
    "🔨 :hammer: Add or update build scripts",
    "🌐 :globe_with_meridians: Internationalization or localization",
    "✏️ :pencil2: Fix typos",
    "💩 :poop: Write bad code that needs improvement",
    "⏪ :rewind: Revert changes",
    "🔀 :twisted_rightwards_arrows: Merge branches",
    "📦 :package: Add or update compiled files or dependencies",
    "👽 :alien: Update code due to external API changes",
    "🚚 :truck: Move or rename files",
    "📄 :page_facing_up: Add or update license",
    "💥 :boom: Introduce breaking changes",
    "🍱 :bento: Add or update assets",
    "♿ :wheelchair: Improve accessibility",
    "💡 :bulb: Add or update comments in source code",
    "🍻 :beers: Celebrate or add fun Easter eggs",
    "💬 :speech_balloon: Add or update text and messages",
    "🗃️ :card_file_box: Perform database-related changes",
    "🔊 :loud_sound: Add or update logs",
    "🔇 :mute: Remove logs",
    "👥 :busts_in_silhouette: Add or update contributor(s)",
    "🚸 :children_crossing: Improve UX or UI accessibility",
    "🏗️ :building_construction: Make architectural changes",
    "📱 :iphone: Work on responsive design or mobile support",
    "🤡 :clown_face: Mock related changes",
    "🥚 :egg: Add or update Easter eggs",
    "🙈 :see_no_evil: Add or update .gitignore file",
    "🧠 :brain: Add or update logic or algorithms",
    "🧰 :toolbox: Add or update tooling/utilities",
    "🧪 :test_tube: Add or update tests",
    "🧱 :bricks: Infrastructure changes",
    "🩹 :adhesive_bandage: Simple fix not critical",
    "🩺 :stethoscope: Add or update health checks",
    "🧩 :jigsaw: Add or update modular code/components",
    "🧹 :broom: Remove useless files or code",
    "🧵 :thread: Add or update multithreading/concurrency",
    "🕹️ :joystick: Add or update scripts/tooling",
    "🧑‍💻 :technologist: Improve developer experience",
    "🗑️ :wastebasket: Deprecate or remove obsolete code",
    "🏁 :checkered_flag: Finish a feature or milestone",
    "🪄 :magic_wand: Minor visual or UX enhancements",
]


def glyph_of(label: str) -> str:
    """Return the leading glyph of a menu label.

    Only the first character is kept; the gitmoji code and the description
    that follow it are discarded.
    """
    return label[:1]


class EmojiCatalog:
    """Ordered collection of menu labels, each starting with its glyph."""

    def __init__(self, labels: Optional[Iterable[str]] = None):
        self.labels: List[str] = list(DEFAULT_LABELS if labels is None else labels)
        if not self.labels:
            raise ConfigurationError("Emoji catalog is empty")
        blank = [i for i, label in enumerate(self.labels) if not label.strip()]
        if blank:
            raise ConfigurationError(f"Emoji catalog has blank labels at {blank}")

    def __len__(self) -> int:
        return len(self.labels)

    def __iter__(self):
        return iter(self.labels)

    def __contains__(self, label: str) -> bool:
        return label in self.labels

    @classmethod
    def from_file(cls, path: Path) -> "EmojiCatalog":
        """Load a catalog from a TOML file holding a ``labels`` array."""
        try:
            with Path(path).open("rb") as f:
                data = tomli.load(f)
        except (OSError, tomli.TOMLDecodeError) as e:
            raise ConfigurationError(f"Cannot read emoji catalog {path}: {e}") from e

        labels = data.get("labels")
        if not isinstance(labels, list) or not all(isinstance(l, str) for l in labels):
            raise ConfigurationError(
                f"Emoji catalog {path} must define 'labels' as a list of strings"
            )
        return cls(labels)
