from __future__ import annotations

from pathlib import Path

import yaml

from climageproc.core.errors import ConfigError


def load_yaml(path: Path) -> dict[str, object]:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"cannot read config {path}: {e}") from e
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml in {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("config root must be a mapping")
    return data


def get_section(cfg: dict[str, object], name: str) -> dict[str, object]:
    v = cfg.get(name)
    if v is None:
        return {}
    if not isinstance(v, dict):
        raise ConfigError(f"config section {name!r} must be a mapping")
    return v


def pick_bool(cfg: dict[str, object], key: str, cli: bool | None, default: bool) -> bool:
    if cli is not None:
        return bool(cli)
    v = cfg.get(key)
    if v is None:
        return default
    if isinstance(v, bool):
        return v
    if isinstance(v, int) and v in (0, 1):
        return bool(v)
    raise ConfigError(f"invalid bool for {key!r}: {v!r}")


def pick_int(cfg: dict[str, object], key: str, cli: int | None, default: int) -> int:
    if cli is not None:
        return int(cli)
    v = cfg.get(key)
    if v is None:
        return default
    return _as_int(key, v)


def pick_opt_int(
    cfg: dict[str, object], key: str, cli: int | None, default: int | None
) -> int | None:
    if cli is not None:
        return int(cli)
    v = cfg.get(key)
    if v is None:
        return default
    return _as_int(key, v)


def pick_str(cfg: dict[str, object], key: str, cli: str | None, default: str | None) -> str | None:
    if cli is not None:
        return str(cli)
    v = cfg.get(key)
    if v is None:
        return default
    if isinstance(v, str):
        return v
    raise ConfigError(f"invalid str for {key!r}: {v!r}")


def _as_int(key: str, v: object) -> int:
    if isinstance(v, bool):
        raise ConfigError(f"invalid int for {key!r}: {v!r}")
    if isinstance(v, int):
        return v
    if isinstance(v, float) and v.is_integer():
        return int(v)
    raise ConfigError(f"invalid int for {key!r}: {v!r}")
