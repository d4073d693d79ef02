"""Configuration loading for docfreq (.docfreq.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError

CONFIG_FILENAME = ".docfreq.yml"
DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024


@dataclass
class ServerConfig:
    """Bind address for service mode."""

    host: str = "0.0.0.0"
    port: int = 8080


@dataclass
class UploadConfig:
    """Limits applied by the HTTP transport before ingestion."""

    max_bytes: int = DEFAULT_MAX_UPLOAD_BYTES


@dataclass
class PdfConfig:
    """PDF extraction policy."""

    ignore_page_errors: bool = True


@dataclass
class LoggingConfig:
    """Log verbosity and optional file sink."""

    verbose: bool = False
    file: Optional[Path] = None


@dataclass
class DocFreqConfig:
    """Represents the settings defined in .docfreq.yml."""

    root: Path
    server: ServerConfig = field(default_factory=ServerConfig)
    upload: UploadConfig = field(default_factory=UploadConfig)
    pdf: PdfConfig = field(default_factory=PdfConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(config_path: Path) -> DocFreqConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return DocFreqConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = DocFreqConfig(root=root)

    server_data = _as_dict(data.get("server"))
    if server_data:
        host = _as_str(server_data.get("host"))
        port = _as_int(server_data.get("port"))
        if host:
            config.server.host = host
        if port is not None and 0 < port < 65536:
            config.server.port = port

    upload_data = _as_dict(data.get("upload"))
    if upload_data:
        max_bytes = _as_int(upload_data.get("max_bytes"))
        if max_bytes is not None and max_bytes > 0:
            config.upload.max_bytes = max_bytes

    pdf_data = _as_dict(data.get("pdf"))
    if pdf_data:
        ignore = _as_bool(pdf_data.get("ignore_page_errors"))
        if ignore is not None:
            config.pdf.ignore_page_errors = ignore

    logging_data = _as_dict(data.get("logging"))
    if logging_data:
        config.logging.verbose = _as_bool(logging_data.get("verbose")) or False
        log_file = _as_str(logging_data.get("file"))
        if log_file:
            config.logging.file = root / log_file

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Unable to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return {} if loaded is None else loaded


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "DEFAULT_MAX_UPLOAD_BYTES",
    "DocFreqConfig",
    "LoggingConfig",
    "PdfConfig",
    "ServerConfig",
    "UploadConfig",
    "load_config",
]
