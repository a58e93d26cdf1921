from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional
import json
import os
from pathlib import Path
from .errors import ConfigError
from .summarizer import SummaryConfig

ENV_PREFIX = "PAGE_DIGEST_"

@dataclass
class RemoteConfig:
    enabled: bool = False
    endpoint: str = "https://api.openai.com/v1/chat/completions"
    model: str = "gpt-4o-mini"
    api_key: Optional[str] = None  # env only, never dumped
    timeout_s: float = 20.0
    max_input_chars: int = 8000

@dataclass
class AppConfig:
    user_agent: str = "PageDigest/0.1 (+https://example.com)"
    timeout_s: float = 15.0
    summary: SummaryConfig = field(default_factory=SummaryConfig)
    remote: RemoteConfig = field(default_factory=RemoteConfig)

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "AppConfig":
        rc = data.get("remote", {}) or {}
        return AppConfig(
            user_agent=data.get("user_agent", "PageDigest/0.1 (+https://example.com)"),
            timeout_s=float(data.get("timeout_s", 15.0)),
            summary=SummaryConfig.from_dict(data.get("summary", {}) or {}),
            remote=RemoteConfig(
                enabled=bool(rc.get("enabled", False)),
                endpoint=rc.get("endpoint", "https://api.openai.com/v1/chat/completions"),
                model=rc.get("model", "gpt-4o-mini"),
                api_key=rc.get("api_key"),
                timeout_s=float(rc.get("timeout_s", 20.0)),
                max_input_chars=int(rc.get("max_input_chars", 8000)),
            ),
        )

    @staticmethod
    def load(path: Path) -> "AppConfig":
        return AppConfig.load_json_str(Path(path).read_text(encoding="utf-8"))

    @staticmethod
    def load_json_str(s: str) -> "AppConfig":
        return AppConfig.from_dict(json.loads(s))

    def apply_env(self, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        """Overlay PAGE_DIGEST_* variables; a present API key turns remote on."""
        env = os.environ if environ is None else environ

        def get(name: str) -> Optional[str]:
            v = env.get(ENV_PREFIX + name)
            return v if v else None

        def num(name: str, conv):
            try:
                return conv(get(name))
            except ValueError:
                raise ConfigError(f"{ENV_PREFIX}{name} must be a number, got {get(name)!r}") from None

        if get("USER_AGENT"):
            self.user_agent = get("USER_AGENT")
        if get("TIMEOUT"):
            self.timeout_s = num("TIMEOUT", float)
        overrides: Dict[str, Any] = {}
        if get("IDEAL_LENGTH"):
            overrides["ideal_length"] = num("IDEAL_LENGTH", int)
        if get("MAX_CHARS"):
            overrides["max_chars"] = num("MAX_CHARS", int)
        if overrides:
            self.summary = replace(self.summary, **overrides)
        if get("REMOTE_ENDPOINT"):
            self.remote.endpoint = get("REMOTE_ENDPOINT")
        if get("REMOTE_MODEL"):
            self.remote.model = get("REMOTE_MODEL")
        if get("REMOTE_API_KEY"):
            self.remote.api_key = get("REMOTE_API_KEY")
            self.remote.enabled = True
        return self

    def dump(self) -> str:
        data = {
            "user_agent": self.user_agent,
            "timeout_s": self.timeout_s,
            "summary": self.summary.to_dict(),
            "remote": {
                "enabled": self.remote.enabled,
                "endpoint": self.remote.endpoint,
                "model": self.remote.model,
                "timeout_s": self.remote.timeout_s,
                "max_input_chars": self.remote.max_input_chars,
            },
        }
        return json.dumps(data, indent=2, ensure_ascii=False)

def load_config(path: Optional[Path] = None) -> AppConfig:
    if path is None and os.environ.get(ENV_PREFIX + "CONFIG"):
        path = Path(os.environ[ENV_PREFIX + "CONFIG"])
    cfg = AppConfig.load(path) if path is not None and Path(path).exists() else AppConfig()
    return cfg.apply_env()

def write_default_config(path: Path) -> None:
    if path.exists():
        raise FileExistsError(f"{path} already exists")
    path.write_text(AppConfig().dump(), encoding="utf-8")
