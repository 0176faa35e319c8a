from __future__ import annotations

import json
from pathlib import Path

import pytest

from vocabulary import (
    AI_TERMS,
    DEFAULT_VOCABULARY,
    FIELD_KEYWORDS,
    STOPWORDS,
    Vocabulary,
    VocabularyError,
    load_vocabulary,
    validate_vocabulary,
)


def _write(tmp_path: Path, payload: object) -> Path:
    path = tmp_path / "vocabulary.json"
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
    return path


def test_builtin_tables_are_populated() -> None:
    assert "the" in STOPWORDS
    assert "の" in STOPWORDS
    assert "AI" in AI_TERMS
    assert len(FIELD_KEYWORDS) == 8
    assert all(FIELD_KEYWORDS.values())


def test_load_vocabulary_without_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("VOCABULARY_PATH", raising=False)
    assert load_vocabulary() is DEFAULT_VOCABULARY


def test_override_replaces_only_given_tables(tmp_path: Path) -> None:
    path = _write(tmp_path, {"ai_terms": ["量子計算", "QML"]})
    vocabulary = load_vocabulary(str(path))

    assert vocabulary.ai_terms == ("量子計算", "QML")
    assert vocabulary.stopwords is STOPWORDS
    assert vocabulary.field_keywords is FIELD_KEYWORDS


def test_override_lowercases_stopwords(tmp_path: Path) -> None:
    path = _write(tmp_path, {"stopwords": ["The", "  Paper ", ""]})
    assert load_vocabulary(str(path)).stopwords == frozenset({"the", "paper"})


def test_override_field_table(tmp_path: Path) -> None:
    path = _write(tmp_path, {"field_keywords": {"Physics": ["量子", "quantum"]}})
    assert load_vocabulary(str(path)).field_keywords == {"Physics": ("量子", "quantum")}


def test_override_path_from_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = _write(tmp_path, {"ai_terms": ["QML"]})
    monkeypatch.setenv("VOCABULARY_PATH", str(path))
    assert load_vocabulary().ai_terms == ("QML",)


def test_missing_override_file(tmp_path: Path) -> None:
    with pytest.raises(VocabularyError, match="not found"):
        load_vocabulary(str(tmp_path / "nope.json"))


def test_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "vocabulary.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(VocabularyError, match="Could not read"):
        load_vocabulary(str(path))


@pytest.mark.parametrize("payload, message", [
    (["not", "an", "object"], "JSON object"),
    ({"stopwords": "the"}, "list of strings"),
    ({"ai_terms": [1, 2]}, "list of strings"),
    ({"field_keywords": ["Robotics"]}, "must be an object"),
    ({"field_keywords": {"Robotics": "robot"}}, "list of strings"),
    ({"ai_terms": []}, "empty AI-term"),
    ({"stopwords": ["  "]}, "empty stopword"),
    ({"field_keywords": {}}, "empty field-keyword"),
    ({"field_keywords": {"Robotics": [""]}}, "no keywords"),
])
def test_bad_override_shapes(tmp_path: Path, payload: object, message: str) -> None:
    path = _write(tmp_path, payload)
    with pytest.raises(VocabularyError, match=message):
        load_vocabulary(str(path))


def test_validate_vocabulary_accepts_defaults() -> None:
    validate_vocabulary(DEFAULT_VOCABULARY)


def test_validate_vocabulary_rejects_empty_field() -> None:
    vocabulary = Vocabulary(stopwords=STOPWORDS, ai_terms=AI_TERMS, field_keywords={"Robotics": ()})
    with pytest.raises(VocabularyError):
        validate_vocabulary(vocabulary)
