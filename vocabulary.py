"""Controlled vocabularies: stopwords, AI/ML terms and research-field keywords.

The built-in tables cover Japanese/English AI-conference proceedings. A JSON file
named by VOCABULARY_PATH may replace any of them:

    {
      "stopwords": ["...", ...],
      "ai_terms": ["...", ...],
      "field_keywords": {"Field label": ["kw", ...], ...}
    }

Keys missing from the file fall back to the built-in table. The vocabulary is
loaded once per process and is never mutated afterwards.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

LOGGER = logging.getLogger(__name__)


class VocabularyError(RuntimeError):
    """Raised when the vocabulary configuration is missing or unusable."""


# ─────────────────────────────────────────────────────────────────────────────
# Stopwords
# ─────────────────────────────────────────────────────────────────────────────

_JAPANESE_FUNCTION_WORDS = (
    "の", "を", "は", "が", "に", "で", "と", "から", "まで", "より", "として", "による",
    "について", "において", "に関する", "である", "する", "した", "される", "できる",
    "これ", "それ", "あれ", "この", "その", "あの", "ここ", "そこ", "あそこ", "また",
    "さらに", "しかし", "ただし", "なお", "および", "ならびに", "もしくは", "または",
    "こと", "もの", "ため", "場合", "時", "際", "上", "中", "下", "前", "後", "間", "内",
    "外", "的", "性", "化", "つ", "れる", "らる", "なる", "ある", "いる", "なっ", "あっ",
)

_ENGLISH_FUNCTION_WORDS = (
    "the", "of", "and", "a", "to", "in", "is", "you", "that", "it", "he", "was", "for",
    "on", "are", "as", "with", "his", "they", "i", "at", "be", "this", "have", "from",
    "or", "one", "had", "by", "word", "but", "not", "what", "all", "were", "we", "when",
    "your", "can", "said", "there", "each", "which", "she", "do", "how", "their", "if",
    "will", "up", "other", "about", "out", "many", "then", "them", "these", "so", "some",
    "her", "would", "make", "like", "into", "him", "has", "two", "more", "go", "no", "way",
    "could", "my", "than", "first", "been", "call", "who", "its", "now", "find", "long",
    "down", "day", "did", "get", "come", "made", "may", "part",
)

_NUMERALS = tuple(str(n) for n in range(31))

_BIBLIOGRAPHIC_WORDS = (
    "pp", "th", "st", "nd", "rd", "vol", "no", "fig", "table", "section", "chapter",
    "page", "pages", "p", "japanese", "society", "artificial", "intelligence", "conference",
    "proceedings", "annual", "international", "national", "symposium", "workshop",
    "ieee", "acm", "springer", "elsevier", "wiley", "academic", "press", "publisher",
    "doi", "isbn", "issn", "www", "http", "https", "com", "org", "jp", "pdf", "html",
)

_PAPER_STRUCTURE_WORDS = (
    "abstract", "introduction", "conclusion", "references", "acknowledgment", "appendix",
    "figure", "equation", "formula", "algorithm", "result", "results",
    "method", "methods", "approach", "proposed", "using", "based", "show", "shows",
    "present", "presents", "paper", "study", "research", "work", "experiment", "evaluation",
    "analysis", "discussion", "related", "previous", "existing", "current", "new", "novel",
)

_PROCEEDINGS_NOISE_WORDS = (
    "zoom", "meeting", "こちら", "university", "japan", "tokyo", "osaka", "kyoto",
    "contact", "email", "tel", "fax", "address", "zip", "住所", "連絡先", "問い合わせ",
    "dept", "department", "faculty", "graduate", "school", "lab", "laboratory",
    "prof", "professor", "dr", "phd", "master", "bachelor", "student",
    "corp", "corporation", "ltd", "inc", "company", "co", "group", "team",
    "slide", "presentation", "poster", "session", "room", "hall", "building",
    "date", "time", "schedule", "program", "agenda", "timetable",
)

STOPWORDS: frozenset[str] = frozenset(
    _JAPANESE_FUNCTION_WORDS
    + _ENGLISH_FUNCTION_WORDS
    + _NUMERALS
    + _BIBLIOGRAPHIC_WORDS
    + _PAPER_STRUCTURE_WORDS
    + _PROCEEDINGS_NOISE_WORDS
)

# ─────────────────────────────────────────────────────────────────────────────
# AI / ML domain terms (matched by bidirectional substring containment)
# ─────────────────────────────────────────────────────────────────────────────

AI_TERMS: tuple[str, ...] = (
    "機械学習", "AI", "人工知能", "ディープラーニング", "深層学習", "ニューラルネットワーク",
    "CNN", "RNN", "LSTM", "GAN", "Transformer", "BERT", "GPT", "自然言語処理",
    "コンピュータビジョン", "画像認識", "音声認識", "強化学習", "DQN", "アルゴリズム",
    "データマイニング", "ビッグデータ", "IoT", "エッジコンピューティング", "クラウド",
    "分類", "回帰", "クラスタリング", "最適化", "遺伝的アルゴリズム", "SVM", "ランダムフォレスト",
)

# ─────────────────────────────────────────────────────────────────────────────
# Research fields (label -> representative keywords, matched case-insensitively)
# ─────────────────────────────────────────────────────────────────────────────

FIELD_KEYWORDS: dict[str, tuple[str, ...]] = {
    "Machine Learning & AI": (
        "機械学習", "AI", "人工知能", "ディープラーニング", "深層学習", "アルゴリズム",
        "machine learning", "deep learning",
    ),
    "Natural Language Processing": (
        "自然言語処理", "NLP", "テキスト", "言語", "対話", "チャットボット",
        "language model",
    ),
    "Computer Vision": (
        "画像", "映像", "カメラ", "認識", "ビジョン", "顔", "物体検出",
        "object detection",
    ),
    "Robotics": (
        "ロボット", "制御", "センサ", "アクチュエータ", "移動", "マニピュレータ",
        "robot",
    ),
    "Data Science": (
        "データ", "統計", "解析", "ビッグデータ", "マイニング", "予測",
        "dataset",
    ),
    "Human Interface": (
        "インタフェース", "UI", "UX", "ユーザ", "インタラクション", "VR", "AR",
    ),
    "Security": (
        "セキュリティ", "暗号", "認証", "プライバシー", "攻撃", "防御",
        "privacy",
    ),
    "Networked Systems": (
        "ネットワーク", "システム", "クラウド", "エッジ", "IoT", "分散",
    ),
}


@dataclass(frozen=True)
class Vocabulary:
    """Immutable bundle of the three lookup tables used by one analysis run."""

    stopwords: frozenset[str]
    ai_terms: tuple[str, ...]
    field_keywords: Mapping[str, tuple[str, ...]]


DEFAULT_VOCABULARY = Vocabulary(
    stopwords=STOPWORDS,
    ai_terms=AI_TERMS,
    field_keywords=FIELD_KEYWORDS,
)


def load_vocabulary(path: str | None = None) -> Vocabulary:
    """Return the vocabulary, applying a JSON override when one is configured.

    Args:
        path: Override file. Reads VOCABULARY_PATH env var if not supplied; when
            neither is set the built-in tables are returned.

    Raises:
        VocabularyError: the override file is missing, not valid JSON, has the
            wrong shape, or leaves any table empty.
    """
    if path is None:
        path = os.getenv("VOCABULARY_PATH") or None

    if path is None:
        vocabulary = DEFAULT_VOCABULARY
    else:
        vocabulary = _load_override(Path(path))

    validate_vocabulary(vocabulary)
    return vocabulary


def validate_vocabulary(vocabulary: Vocabulary) -> None:
    """Raise VocabularyError unless every table has at least one entry."""
    if not vocabulary.stopwords:
        raise VocabularyError("Vocabulary has an empty stopword set")
    if not vocabulary.ai_terms:
        raise VocabularyError("Vocabulary has an empty AI-term list")
    if not vocabulary.field_keywords:
        raise VocabularyError("Vocabulary has an empty field-keyword table")
    for label, keywords in vocabulary.field_keywords.items():
        if not keywords:
            raise VocabularyError(f"Field {label!r} has no keywords")


def _load_override(path: Path) -> Vocabulary:
    if not path.is_file():
        raise VocabularyError(f"Vocabulary file not found: {path}")

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise VocabularyError(f"Could not read vocabulary file {path}: {exc}") from exc

    if not isinstance(payload, dict):
        raise VocabularyError(f"Vocabulary file {path} must contain a JSON object")

    stopwords = _str_list(payload, "stopwords", path)
    ai_terms = _str_list(payload, "ai_terms", path)
    field_keywords = _field_table(payload, path)

    LOGGER.info(
        "Loaded vocabulary override from %s (stopwords=%s ai_terms=%s fields=%s)",
        path,
        "custom" if stopwords is not None else "default",
        "custom" if ai_terms is not None else "default",
        "custom" if field_keywords is not None else "default",
    )

    return Vocabulary(
        stopwords=frozenset(s.lower() for s in stopwords) if stopwords is not None else STOPWORDS,
        ai_terms=tuple(ai_terms) if ai_terms is not None else AI_TERMS,
        field_keywords=field_keywords if field_keywords is not None else FIELD_KEYWORDS,
    )


def _str_list(payload: dict[str, Any], key: str, path: Path) -> list[str] | None:
    if key not in payload:
        return None
    value = payload[key]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise VocabularyError(f"{path}: '{key}' must be a list of strings")
    return [v.strip() for v in value if v.strip()]


def _field_table(payload: dict[str, Any], path: Path) -> dict[str, tuple[str, ...]] | None:
    if "field_keywords" not in payload:
        return None
    value = payload["field_keywords"]
    if not isinstance(value, dict):
        raise VocabularyError(f"{path}: 'field_keywords' must be an object")

    table: dict[str, tuple[str, ...]] = {}
    for label, keywords in value.items():
        if not isinstance(keywords, list) or not all(isinstance(k, str) for k in keywords):
            raise VocabularyError(f"{path}: keywords for field {label!r} must be a list of strings")
        table[str(label)] = tuple(k for k in keywords if k.strip())
    return table
