import pandas as pd
import pytest

from corpus_comparison import (
    CorpusComparison,
    StudyConfig,
    main,
    parse_to_word_list,
    remove_empty_words,
    remove_punctuation,
    text_to_word_lengths,
    words_to_word_lengths,
    word_lengths,
)
from statistical_analysis.exceptions import InsufficientSampleSizeError
from statistical_analysis.significance_calculator import HypothesisTest


SHORT_TEXT = "a bb a bb a bb a bb"
LONG_TEXT = ("extraordinary magnificent wonderful beautiful "
             "tremendous fantastic marvellous incredible")


def test_remove_punctuation_strips_unicode_marks():
    assert remove_punctuation(["¡Hola!", "«bonjour»", "l'amour", "—"]) == ["Hola", "bonjour", "lamour", ""]


def test_remove_punctuation_strips_ascii_symbols():
    assert remove_punctuation(["a+b", "$5", "<tag>", "x=y", "a^b|c~d", "`q`"]) == ["ab", "5", "tag", "xy", "abcd", "q"]


def test_empty_words_and_zero_lengths_dropped():
    assert remove_empty_words(["", "tren", ""]) == ["tren"]
    assert word_lengths(["", "de", "fuego"]) == [2, 5]
    assert word_lengths(["de", "fuego"], min_length=3) == [5]


def test_text_to_word_lengths():
    assert text_to_word_lengths("El tren, de Noé... — ¡sí!") == [2, 4, 2, 3, 2]


def test_parse_to_word_list(tmp_path):
    path = tmp_path / "es.txt"
    path.write_text("Milonga  del\nmar\n", encoding="utf-8")
    assert parse_to_word_list(path) == ["Milonga", "del", "mar"]


def test_parse_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="could not be found"):
        parse_to_word_list(tmp_path / "missing.txt")


def test_config_accepts_string_alternative():
    assert StudyConfig(alternative="greater_than").alternative is HypothesisTest.GREATER_THAN
    with pytest.raises(ValueError):
        StudyConfig(alternative="sideways")
    with pytest.raises(ValueError):
        StudyConfig(min_word_length=0)


def test_analyze_texts_shorter_words():
    config = StudyConfig(label_x="Spanish", label_y="French")
    result = CorpusComparison(config).analyze_texts(SHORT_TEXT, LONG_TEXT)

    assert result.comparison.reject_null is True
    assert result.word_lengths_x == [1, 2] * 4
    assert result.conclusion() == (
        "The hypothesis test concludes that there is evidence that Spanish words "
        "tend to be shorter than French words, at 95% confidence."
    )


def test_analyze_texts_no_evidence():
    config = StudyConfig(alternative=HypothesisTest.GREATER_THAN)
    result = CorpusComparison(config).analyze_texts(SHORT_TEXT, LONG_TEXT)
    assert result.comparison.reject_null is False
    assert "NO evidence" in result.conclusion()
    assert "longer than" in result.conclusion()


def test_summary_frame():
    result = CorpusComparison().analyze_texts(SHORT_TEXT, LONG_TEXT)
    frame = result.summary_frame()
    assert isinstance(frame, pd.DataFrame)
    assert list(frame.index) == ["X", "Y"]
    assert frame.loc["X", "n"] == 8
    assert frame.loc["X", "mean"] == pytest.approx(1.5)
    assert (frame["ci_lower"] <= frame["mean"]).all()
    assert (frame["mean"] <= frame["ci_upper"]).all()


def test_analyze_too_few_words():
    with pytest.raises(InsufficientSampleSizeError):
        CorpusComparison().analyze_texts("uno dos tres", LONG_TEXT)


def test_main_prints_report(tmp_path, capsys):
    es = tmp_path / "es_input.txt"
    fr = tmp_path / "fr_input.txt"
    es.write_text(SHORT_TEXT, encoding="utf-8")
    fr.write_text(LONG_TEXT, encoding="utf-8")

    exit_code = main([str(es), str(fr), "--label-x", "Spanish", "--label-y", "French"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Spanish" in out and "French" in out
    assert "there is evidence that Spanish words tend to be shorter" in out


def test_main_missing_file_returns_error(tmp_path):
    assert main([str(tmp_path / "a.txt"), str(tmp_path / "b.txt")]) == 1


def test_main_small_corpus_returns_error(tmp_path):
    small = tmp_path / "small.txt"
    small.write_text("uno dos", encoding="utf-8")
    assert main([str(small), str(small)]) == 1


def test_words_to_word_lengths_on_token_list():
    assert words_to_word_lengths(["¡sí!", "---", "a+b", "mar"]) == [2, 2, 3]


def test_analyze_word_lists_matches_analyze_texts():
    comparison = CorpusComparison()
    from_words = comparison.analyze_word_lists(SHORT_TEXT.split(), LONG_TEXT.split())
    from_text = comparison.analyze_texts(SHORT_TEXT, LONG_TEXT)
    assert from_words.word_lengths_x == from_text.word_lengths_x
    assert from_words.word_lengths_y == from_text.word_lengths_y
    assert from_words.comparison.reject_null is from_text.comparison.reject_null


def test_analyze_files_uses_file_tokens(tmp_path):
    es = tmp_path / "es.txt"
    fr = tmp_path / "fr.txt"
    es.write_text("a bb a bb\na bb a bb +", encoding="utf-8")
    fr.write_text(LONG_TEXT, encoding="utf-8")
    result = CorpusComparison().analyze_files(es, fr)
    assert result.word_lengths_x == [1, 2] * 4
    assert result.comparison.reject_null is True
