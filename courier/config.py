from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
import os
from pathlib import Path
import tomllib
from typing import cast
import warnings

from .constants import Defaults, EnvVars, FormatVersions, LogLevels


@dataclass(frozen=True, slots=True)
class CourierConfig:
    supported_formats: tuple[str, ...] = field(
        default_factory=lambda: FormatVersions.SUPPORTED
    )
    max_age_months: int = Defaults.MAX_AGE_MONTHS
    verbosity: int = Defaults.VERBOSITY

    def __post_init__(self) -> None:
        if not self.supported_formats:
            raise ValueError("supported_formats must contain at least one version")
        if any(not version.strip() for version in self.supported_formats):
            raise ValueError(
                f"supported_formats must not contain blank versions, got {self.supported_formats!r}"
            )
        if self.max_age_months < 1:
            raise ValueError(
                f"max_age_months must be positive, got {self.max_age_months}"
            )
        if not LogLevels.NORMAL <= self.verbosity <= LogLevels.DEBUG:
            raise ValueError(
                f"verbosity must be between {LogLevels.NORMAL} and {LogLevels.DEBUG}, got {self.verbosity}"
            )

    @classmethod
    def from_env(cls) -> CourierConfig:
        raw_formats = os.getenv(EnvVars.FORMATS)
        supported_formats = (
            _split_formats(raw_formats) if raw_formats else FormatVersions.SUPPORTED
        )
        return cls(
            supported_formats=supported_formats,
            max_age_months=_coerce_int(
                os.getenv(EnvVars.MAX_AGE_MONTHS, str(Defaults.MAX_AGE_MONTHS)),
                key=EnvVars.MAX_AGE_MONTHS,
            ),
            verbosity=_coerce_int(
                os.getenv(EnvVars.VERBOSITY, str(Defaults.VERBOSITY)),
                key=EnvVars.VERBOSITY,
            ),
        )


class ConfigLoader:
    pass

    @staticmethod
    def load(config_file: Path | None = None) -> CourierConfig:
        config = CourierConfig.from_env()
        if config_file is None:
            config_file = Path(Defaults.CONFIG_FILE)
        if config_file.exists():
            try:
                config = ConfigLoader._load_from_toml(config_file, config)
            except (OSError, tomllib.TOMLDecodeError) as e:
                warnings.warn(
                    f"Failed to load config from {config_file}: {e}", stacklevel=2
                )
        return config

    @staticmethod
    def _load_from_toml(
        config_file: Path, base_config: CourierConfig
    ) -> CourierConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        dispatch = _get_table(data, "dispatch")
        logging_section = _get_table(data, "logging")
        supported_formats = base_config.supported_formats
        if (value := dispatch.get("supported_formats")) is not None:
            supported_formats = _coerce_formats(
                value, key="dispatch.supported_formats"
            )
        max_age_months = base_config.max_age_months
        if (value := dispatch.get("max_age_months")) is not None:
            max_age_months = _coerce_int(value, key="dispatch.max_age_months")
        verbosity = base_config.verbosity
        if (value := logging_section.get("verbosity")) is not None:
            verbosity = _coerce_int(value, key="logging.verbosity")
        return CourierConfig(
            supported_formats=supported_formats,
            max_age_months=max_age_months,
            verbosity=verbosity,
        )


def _split_formats(raw: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in raw.split(",") if part.strip())


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _coerce_formats(value: object, *, key: str) -> tuple[str, ...]:
    if isinstance(value, str):
        return _split_formats(value)
    if isinstance(value, Sequence):
        items = cast("Sequence[object]", value)
        if all(isinstance(item, str) for item in items):
            return tuple(cast("Sequence[str]", items))
    raise ValueError(f"{key} must be a string or a list of strings")


def _coerce_int(value: object, *, key: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{key} must be an int, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value.is_integer():
            return int(value)
        raise ValueError(f"{key} must be an integer, got {value}")
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError as e:
            raise ValueError(f"{key} must be an integer, got {value!r}") from e
    raise ValueError(f"{key} must be an int or string, got {type(value).__name__}")
