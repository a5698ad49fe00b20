from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from term_xray.application.use_cases.context_selector import ContextSelector, select_context
from term_xray.core.settings import ContextSettings
from term_xray.domain.result import ContextResult, Fallback, FallbackReason, is_fallback

DOC = (
    "The cat sat on the mat. The dog barked at the mailman. Birds sang in the old oak tree. "
    "A cat watched them closely. Nobody noticed the rain."
)


def _selector(**overrides: int) -> ContextSelector:
    return ContextSelector(ContextSettings(**overrides))


def test_selects_matches_with_neighbours() -> None:
    out = _selector().select(DOC, "cat", before=0, after=0)
    assert isinstance(out, ContextResult)
    assert out.text == "The cat sat on the mat. A cat watched them closely."
    assert out.sentence_count == 2
    assert out.matched_positions == (1, 4)
    assert out.selected_positions == (1, 4)
    assert out.truncated is False


def test_overlapping_windows_rebuild_document_order() -> None:
    out = _selector().select(DOC, "cat", before=1, after=1)
    assert isinstance(out, ContextResult)
    assert out.selected_positions == (1, 2, 3, 4, 5)
    assert out.text == DOC
    assert out.sentence_count == 5


def test_window_defaults_come_from_settings() -> None:
    out = _selector(context_sentences_before=0, context_sentences_after=1).select(DOC, "dog")
    assert isinstance(out, ContextResult)
    assert out.selected_positions == (2, 3)


def test_explicit_window_overrides_settings() -> None:
    sel = _selector(context_sentences_before=0, context_sentences_after=0)
    out = sel.select(DOC, "rain", before=1)
    assert isinstance(out, ContextResult)
    assert out.selected_positions == (4, 5)


def test_scenario_b_term_absent_signals_fallback() -> None:
    out = _selector().select(DOC, "elephant")
    assert isinstance(out, Fallback)
    assert out.reason is FallbackReason.NO_MATCH
    assert out.sentence_count == 0
    assert is_fallback(out)


def test_scenario_c_short_document_bypasses_segmenter(monkeypatch: pytest.MonkeyPatch) -> None:
    def _boom(*_a: object, **_k: object) -> None:
        raise AssertionError("segmenter must not run for short documents")

    monkeypatch.setattr("term_xray.application.use_cases.context_selector.segment", _boom)
    out = _selector().select("The cat sat. The cat ran far away. It was happy.", "cat")
    assert isinstance(out, Fallback)
    assert out.reason is FallbackReason.TOO_SHORT


def test_scenario_d_budget_truncates_exactly() -> None:
    doc = " ".join(f"Sentence {i} mentions the whale and keeps going on." for i in range(1500))
    assert len(doc) > 60000
    out = _selector().select(doc, "whale", max_chars=50000)
    assert isinstance(out, ContextResult)
    assert len(out.text) == 50000
    assert out.truncated is True
    assert out.sentence_count == 1500


def test_budget_from_settings() -> None:
    out = _selector(max_characters=30).select(DOC, "cat")
    assert isinstance(out, ContextResult)
    assert out.text == DOC[:30]
    assert out.truncated is True


def test_empty_and_whitespace_documents() -> None:
    sel = _selector()
    for doc in ("", "   \n  ", None):
        out = sel.select(doc, "cat")  # type: ignore[arg-type]
        assert isinstance(out, Fallback)
        assert out.reason is FallbackReason.EMPTY_INPUT


def test_only_short_fragments_yields_no_sentences() -> None:
    out = _selector().select("Hi. " * 30, "hi")
    assert isinstance(out, Fallback)
    assert out.reason is FallbackReason.NO_SENTENCES


def test_blank_term_is_no_match() -> None:
    out = _selector().select(DOC, "  ")
    assert isinstance(out, Fallback)
    assert out.reason is FallbackReason.NO_MATCH


def test_language_hint_does_not_change_result() -> None:
    sel = _selector()
    assert sel.select(DOC, "cat", language="zh") == sel.select(DOC, "cat")


def test_cjk_document() -> None:
    doc = "他走进了房间然后坐下来了。" * 4 + "她看着窗外的风景很久很久！" + "远处传来了熟悉的钟声响起。" * 4
    out = _selector().select(doc, "窗外", before=1, after=1)
    assert isinstance(out, ContextResult)
    assert out.selected_positions == (4, 5, 6)


def test_module_level_helper() -> None:
    out = select_context(DOC, "mailman", before=0, after=0)
    assert isinstance(out, ContextResult)
    assert out.text == "The dog barked at the mailman."


def test_independent_calls_are_parallel_safe() -> None:
    sel = _selector()
    terms = ["cat", "dog", "rain", "oak", "elephant"] * 20
    expected = [sel.select(DOC, t) for t in terms]
    with ThreadPoolExecutor(max_workers=8) as pool:
        got = list(pool.map(lambda t: sel.select(DOC, t), terms))
    assert got == expected


def test_module_level_helper_forwards_language_hint(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level("INFO", logger="term_xray.application.use_cases.context_selector"):
        out = select_context(DOC, "mailman", before=0, after=0, language="de")
    assert isinstance(out, ContextResult)
    assert "lang=de" in caplog.text
