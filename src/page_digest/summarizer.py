from __future__ import annotations
from dataclasses import dataclass, fields
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple
import re

PLACEHOLDER = "本文が取得できませんでした。"
ELLIPSIS = "…"

_WS = re.compile(r"\s+")
_SENTENCE = re.compile(r"[^。！？!?]+[。！？!?]?")
_TOKEN = re.compile(
    "["
    "\u3005-\u3007\u3400-\u4dbf\u4e00-\u9fff\uf900-\ufaff\U00020000-\U0003134f"  # CJK ideographs, 々〆〇
    "\u3040-\u309f"  # hiragana
    "\u30a0-\u30ff\uff66-\uff9f"  # katakana, half-width katakana
    "A-Za-z\u00c0-\u00d6\u00d8-\u00f6\u00f8-\u024f\uff21-\uff3a\uff41-\uff5a"
    "0-9\uff10-\uff19"
    "]{2,}"
)


@dataclass(frozen=True)
class SummaryConfig:
    ideal_length: int = 80
    max_chars: int = 120
    length_penalty: float = 0.05
    position_boosts: Tuple[float, ...] = (1.10, 1.05)
    placeholder: str = PLACEHOLDER

    def __post_init__(self):
        # frozen: clamp through object.__setattr__
        object.__setattr__(self, "ideal_length", max(1, int(self.ideal_length)))
        object.__setattr__(self, "max_chars", max(1, int(self.max_chars)))
        object.__setattr__(self, "position_boosts", tuple(float(b) for b in self.position_boosts))

    @staticmethod
    def from_dict(data: Optional[Mapping[str, Any]]) -> "SummaryConfig":
        known = {f.name for f in fields(SummaryConfig)}
        return SummaryConfig(**{k: v for k, v in (data or {}).items() if k in known})

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ideal_length": self.ideal_length,
            "max_chars": self.max_chars,
            "length_penalty": self.length_penalty,
            "position_boosts": list(self.position_boosts),
            "placeholder": self.placeholder,
        }


DEFAULT_SUMMARY_CONFIG = SummaryConfig()


def normalize_whitespace(text: Optional[str]) -> str:
    return _WS.sub(" ", text or "").strip()


def split_sentences(normalized: str) -> List[str]:
    if not normalized:
        return []
    sents = [m.strip() for m in _SENTENCE.findall(normalized)]
    sents = [s for s in sents if s]
    # e.g. text made only of terminators
    return sents or [normalized]


def tokenize(sentence: str) -> List[str]:
    return [t.lower() for t in _TOKEN.findall(sentence)]


def build_frequency_map(sentences: Sequence[str]) -> Dict[str, int]:
    """
    Document frequency: each sentence adds 1 per distinct token, so a word
    repeated inside a single sentence counts once.
    """
    freq: Dict[str, int] = {}
    for s in sentences:
        for tok in set(tokenize(s)):
            freq[tok] = freq.get(tok, 0) + 1
    return freq


def score_sentence(
    sentence: str,
    position: int,
    freq: Mapping[str, int],
    config: SummaryConfig = DEFAULT_SUMMARY_CONFIG,
) -> float:
    """
    keyword salience x position boost - distance from the ideal length.
    Repeated tokens inside the sentence each add their frequency.
    """
    tokens = tokenize(sentence)
    if not tokens:
        return 0.0
    keyword = sum(freq.get(t, 0) for t in tokens)
    boosts = config.position_boosts
    boost = boosts[position] if 0 <= position < len(boosts) else 1.0
    penalty = abs(len(sentence) - config.ideal_length) * config.length_penalty
    return keyword * boost - penalty


def rank_sentences(
    sentences: Sequence[str],
    freq: Mapping[str, int],
    config: SummaryConfig = DEFAULT_SUMMARY_CONFIG,
) -> List[Tuple[int, float, str]]:
    scores = [(i, score_sentence(s, i, freq, config), s) for i, s in enumerate(sentences)]
    # sorted() is stable with reverse=True, ties keep document order
    return sorted(scores, key=lambda x: x[1], reverse=True)


def select_summary(
    sentences: Sequence[str],
    freq: Mapping[str, int],
    config: SummaryConfig = DEFAULT_SUMMARY_CONFIG,
) -> str:
    if not sentences:
        return ""
    if len(sentences) == 1:
        return sentences[0]
    ranked = rank_sentences(sentences, freq, config)
    if not ranked:
        return sentences[0]
    return ranked[0][2]


def format_summary(body: Optional[str], max_chars: int = 120, placeholder: str = PLACEHOLDER) -> str:
    line = normalize_whitespace(body) or normalize_whitespace(placeholder)
    max_chars = max(1, max_chars)
    if len(line) > max_chars:
        return line[: max_chars - 1] + ELLIPSIS
    return line


def summarize_locally(text: Optional[str], config: Optional[SummaryConfig] = None) -> str:
    """
    Offline single-sentence extractive summary:
    - Collapse whitespace and split on 。！？!?
    - Score sentences by cross-sentence token frequency, position and length fit
    - Return the best one, cut to config.max_chars
    """
    cfg = config or DEFAULT_SUMMARY_CONFIG
    sents = split_sentences(normalize_whitespace(text))
    freq = build_frequency_map(sents) if len(sents) > 1 else {}
    body = select_summary(sents, freq, cfg)
    return format_summary(body, cfg.max_chars, cfg.placeholder)
