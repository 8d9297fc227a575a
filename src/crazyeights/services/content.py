from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from jsonschema import Draft202012Validator

from crazyeights.engine.game import GameConfig
from crazyeights.session import SessionConfig

logger = logging.getLogger(__name__)


class ContentError(RuntimeError):
    pass


def _load_json(path: Path) -> object:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ContentError(f"Missing content file: {path}") from e
    except json.JSONDecodeError as e:
        raise ContentError(f"Invalid JSON in {path}: {e}") from e


def validate_json(instance: object, schema: object, *, context: str) -> None:
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(instance), key=lambda e: list(e.path))
    if errors:
        lines = [f"Schema validation failed for {context}:"]
        for err in errors[:10]:
            loc = "/".join(str(p) for p in err.absolute_path)
            lines.append(f"- {loc}: {err.message}")
        raise ContentError("\n".join(lines))


def _require_int(obj: Mapping[str, object], key: str) -> int:
    v = obj.get(key)
    if not isinstance(v, int):
        raise ContentError(f"Expected int for {key}")
    return v


def _require_number(obj: Mapping[str, object], key: str) -> float:
    v = obj.get(key)
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise ContentError(f"Expected number for {key}")
    return float(v)


def _require_str(obj: Mapping[str, object], key: str) -> str:
    v = obj.get(key)
    if not isinstance(v, str):
        raise ContentError(f"Expected string for {key}")
    return v


@dataclass(frozen=True)
class RulesContent:
    hand_size: int
    ai_delay: float
    skip_delay: float
    welcome_message: str
    rules: tuple[str, ...]

    def session_config(self) -> SessionConfig:
        return SessionConfig(
            ai_delay=self.ai_delay,
            skip_delay=self.skip_delay,
            welcome_message=self.welcome_message,
            game=GameConfig(hand_size=self.hand_size),
        )


class ContentService:
    # data file -> schema file
    FILES: dict[str, str] = {"game_rules.json": "game_rules.schema.json"}

    def __init__(self, data_dir: Path, schema_dir: Path) -> None:
        self._data_dir = data_dir
        self._schema_dir = schema_dir

    def _load_validated(self, name: str) -> object:
        path = self._data_dir / name
        raw = _load_json(path)
        schema = _load_json(self._schema_dir / self.FILES[name])
        validate_json(raw, schema, context=str(path))
        return raw

    def validate_all(self) -> None:
        for name in self.FILES:
            self._load_validated(name)
            logger.debug("validated %s", name)

    def load_rules(self) -> RulesContent:
        raw = self._load_validated("game_rules.json")
        if not isinstance(raw, dict):
            raise ContentError("game_rules.json must be an object")
        rules = raw.get("rules")
        if not isinstance(rules, list):
            raise ContentError("game_rules.json.rules must be a list")
        content = RulesContent(
            hand_size=_require_int(raw, "hand_size"),
            ai_delay=_require_number(raw, "ai_delay_seconds"),
            skip_delay=_require_number(raw, "skip_delay_seconds"),
            welcome_message=_require_str(raw, "welcome_message"),
            rules=tuple(str(line) for line in rules),
        )
        logger.info("loaded rules: hand_size=%d ai_delay=%.2fs", content.hand_size, content.ai_delay)
        return content
