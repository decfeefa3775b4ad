# どこで: `src/circlestrip/core/runtime_config.py`。
# 何を: config.yaml による実行時設定（探索・ロード・キャッシュ）を提供する。
# なぜ: CLI の既定値（点数・巻き順・方式・精度）をユーザーが差し替えられるようにするため。

from __future__ import annotations

from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any

_METHODS = ("half", "quarter")
_DTYPES = ("float32", "float64")


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """circlestrip の実行時設定。"""

    config_path: Path | None
    count: int
    clockwise: bool
    method: str
    dtype: str
    precision: int


_EXPLICIT_CONFIG_PATH: Path | None = None
_CONFIG_CACHE: RuntimeConfig | None = None


def set_config_path(path: str | Path | None) -> None:
    """以降の設定探索で使う明示 config パスを設定する。

    Notes
    -----
    `path` を None にすると明示指定を解除し、既定の探索に戻る。
    """

    global _EXPLICIT_CONFIG_PATH, _CONFIG_CACHE
    if path is None:
        _EXPLICIT_CONFIG_PATH = None
        _CONFIG_CACHE = None
        return
    _EXPLICIT_CONFIG_PATH = Path(str(path)).expanduser()
    _CONFIG_CACHE = None


def _default_config_candidates() -> tuple[Path, ...]:
    cwd = Path.cwd()
    home = Path.home()
    return (
        cwd / ".circlestrip" / "config.yaml",
        home / ".config" / "circlestrip" / "config.yaml",
    )


def _as_mapping(value: Any, *, key: str) -> dict[str, Any]:
    if value is None:
        return {}
    if isinstance(value, dict):
        return dict(value)
    raise RuntimeError(f"{key} は mapping である必要があります: got={value!r}")


def _as_positive_int(value: Any, *, key: str) -> int:
    if value is None:
        raise RuntimeError(f"{key} が未設定です（同梱 default_config.yaml を確認してください）")
    if isinstance(value, bool):
        raise RuntimeError(f"{key} は整数である必要があります: got={value!r}")
    try:
        out = int(value)
    except Exception as exc:
        raise RuntimeError(f"{key} は整数である必要があります: got={value!r}") from exc
    if out < 1:
        raise ValueError(f"{key} は 1 以上である必要があります: got={out}")
    return out


def _as_bool(value: Any, *, key: str) -> bool:
    if value is None:
        raise RuntimeError(f"{key} が未設定です（同梱 default_config.yaml を確認してください）")
    if not isinstance(value, bool):
        raise RuntimeError(f"{key} は true/false である必要があります: got={value!r}")
    return value


def _as_choice(value: Any, *, key: str, choices: tuple[str, ...]) -> str:
    if value is None:
        raise RuntimeError(f"{key} が未設定です（同梱 default_config.yaml を確認してください）")
    s = str(value).strip()
    if s not in choices:
        raise ValueError(f"{key} は {list(choices)} のいずれかである必要があります: got={value!r}")
    return s


def _merge_section(payload: dict[str, Any], override: dict[str, Any]) -> None:
    # セクション単位ではなくキー単位で上書きする。
    for key, value in override.items():
        base = payload.get(key)
        if isinstance(base, dict) and isinstance(value, dict):
            merged = dict(base)
            merged.update(value)
            payload[key] = merged
        else:
            payload[key] = value


def _load_yaml_text(text: str, *, source: str) -> dict[str, Any]:
    try:
        import yaml  # type: ignore[import-untyped]
    except Exception as exc:  # pragma: no cover
        raise RuntimeError(f"PyYAML を import できません: {exc}") from exc

    try:
        data = yaml.safe_load(text)
    except Exception as exc:
        raise RuntimeError(f"config.yaml の読み込みに失敗しました: source={source}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise RuntimeError(f"config.yaml は mapping である必要があります: source={source}")

    return dict(data)


def _load_yaml_config(path: Path) -> dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    return _load_yaml_text(text, source=str(path))


def _load_packaged_default_config() -> dict[str, Any]:
    """同梱デフォルト config をロードして dict を返す。"""

    try:
        blob = (
            resources.files("circlestrip")
            .joinpath("resource", "default_config.yaml")
            .read_text(encoding="utf-8")
        )
    except Exception as exc:  # pragma: no cover
        raise RuntimeError(
            "同梱 default_config.yaml の読み込みに失敗しました"
            "（パッケージ配布物の package-data を確認してください）"
        ) from exc

    return _load_yaml_text(blob, source="circlestrip/resource/default_config.yaml")


def runtime_config() -> RuntimeConfig:
    """実行時設定をロードして返す（キャッシュ）。

    上書き順（後勝ち）:
    1) 同梱 default_config.yaml
    2) `./.circlestrip/config.yaml` / `~/.config/circlestrip/config.yaml`
    3) `set_config_path(...)` で指定したパス
    """

    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None:
        return _CONFIG_CACHE

    explicit_path = _EXPLICIT_CONFIG_PATH
    if explicit_path is not None and not explicit_path.is_file():
        raise FileNotFoundError(f"config.yaml が見つかりません: {explicit_path}")

    discovered_path: Path | None = None
    for p in _default_config_candidates():
        if p.is_file():
            discovered_path = p
            break

    payload = _load_packaged_default_config()
    if discovered_path is not None:
        _merge_section(payload, _load_yaml_config(discovered_path))
    if explicit_path is not None:
        _merge_section(payload, _load_yaml_config(explicit_path))

    version = payload.get("version")
    if version is None:
        raise RuntimeError(
            "config.yaml の version が未設定です（同梱 default_config.yaml を確認してください）"
        )
    try:
        version_i = int(version)
    except Exception as exc:
        raise RuntimeError(f"config.yaml の version は整数である必要があります: got={version!r}") from exc
    if version_i != 1:
        raise RuntimeError(f"未対応の config.yaml version です: got={version_i}")

    circle = _as_mapping(payload.get("circle"), key="circle")
    output = _as_mapping(payload.get("output"), key="output")

    cfg = RuntimeConfig(
        config_path=explicit_path or discovered_path,
        count=_as_positive_int(circle.get("count"), key="circle.count"),
        clockwise=_as_bool(circle.get("clockwise"), key="circle.clockwise"),
        method=_as_choice(circle.get("method"), key="circle.method", choices=_METHODS),
        dtype=_as_choice(circle.get("dtype"), key="circle.dtype", choices=_DTYPES),
        precision=_as_positive_int(output.get("precision"), key="output.precision"),
    )
    _CONFIG_CACHE = cfg
    return cfg


__all__ = ["RuntimeConfig", "runtime_config", "set_config_path"]
