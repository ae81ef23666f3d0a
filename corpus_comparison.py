"""
Compare mean word length between two text corpora.

Each corpus is split on whitespace, stripped of punctuation and reduced to
a list of word lengths. The 95% confidence intervals for the two mean
lengths are then compared with a directional hypothesis test, e.g.
H0: S = F against Ha: S < F for Spanish and French song lyrics.
"""

import argparse
import logging
import string
import sys
import unicodedata
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Union

import pandas as pd

from statistical_analysis.significance_calculator import HypothesisTest
from statistical_engine import ComparisonResult, StatisticalEngine


logger = logging.getLogger(__name__)

ALTERNATIVE_PHRASES = {
    HypothesisTest.LESS_THAN: "shorter than",
    HypothesisTest.GREATER_THAN: "longer than",
    HypothesisTest.NOT_EQUAL: "a different length from",
}


@dataclass
class StudyConfig:
    label_x: str = "X"
    label_y: str = "Y"
    alternative: Union[HypothesisTest, str] = HypothesisTest.LESS_THAN
    encoding: str = "utf-8"
    min_word_length: int = 1

    def __post_init__(self):
        if not isinstance(self.alternative, HypothesisTest):
            try:
                self.alternative = HypothesisTest(self.alternative)
            except ValueError:
                raise ValueError(f"Unknown alternative: {self.alternative}") from None
        if self.min_word_length < 1:
            raise ValueError(f"min_word_length must be at least 1, got {self.min_word_length}")


@dataclass
class CorpusComparisonResult:
    label_x: str
    label_y: str
    word_lengths_x: List[int]
    word_lengths_y: List[int]
    comparison: ComparisonResult

    def summary_frame(self) -> pd.DataFrame:
        """One row per corpus with size, mean, std and interval bounds"""
        c = self.comparison
        rows = [
            {
                'corpus': self.label_x,
                'n': c.sample_size_x,
                'mean': c.mean_x,
                'std': c.std_x,
                'ci_lower': c.interval_x.lower_bound,
                'ci_upper': c.interval_x.upper_bound,
            },
            {
                'corpus': self.label_y,
                'n': c.sample_size_y,
                'mean': c.mean_y,
                'std': c.std_y,
                'ci_lower': c.interval_y.lower_bound,
                'ci_upper': c.interval_y.upper_bound,
            },
        ]
        return pd.DataFrame(rows).set_index('corpus')

    def conclusion(self) -> str:
        phrase = ALTERNATIVE_PHRASES[self.comparison.hypothesis_test]
        evidence = "" if self.comparison.reject_null else "NO "
        return (
            f"The hypothesis test concludes that there is {evidence}evidence that "
            f"{self.label_x} words tend to be {phrase} {self.label_y} words, "
            f"at 95% confidence."
        )


# ========== TEXT PREPARATION ==========

def parse_to_word_list(path: Union[str, Path], encoding: str = "utf-8") -> List[str]:
    """Whitespace-separated tokens of a text file"""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"The given file path ({path}) could not be found")
    return path.read_text(encoding=encoding).split()


def _is_punctuation(ch: str) -> bool:
    return ch in string.punctuation or unicodedata.category(ch).startswith('P')


def remove_punctuation(words: Sequence[str]) -> List[str]:
    """Strip ASCII punctuation and symbols plus all Unicode punctuation from each word"""
    return [''.join(ch for ch in word if not _is_punctuation(ch)) for word in words]


def remove_empty_words(words: Sequence[str]) -> List[str]:
    return [word for word in words if word]


def word_lengths(words: Sequence[str], min_length: int = 1) -> List[int]:
    """Lengths of the words, dropping any shorter than min_length"""
    return [len(word) for word in words if len(word) >= min_length]


def words_to_word_lengths(words: Sequence[str], min_length: int = 1) -> List[int]:
    return word_lengths(remove_empty_words(remove_punctuation(words)), min_length)


def text_to_word_lengths(text: str, min_length: int = 1) -> List[int]:
    return words_to_word_lengths(text.split(), min_length)


# ========== COMPARISON ==========

class CorpusComparison:
    def __init__(self, config: Optional[StudyConfig] = None):
        self.config = config or StudyConfig()
        self.statistical_engine = StatisticalEngine()

    def analyze_texts(self, text_x: str, text_y: str) -> CorpusComparisonResult:
        """Compare mean word length of two texts"""
        return self.analyze_word_lists(text_x.split(), text_y.split())

    def analyze_word_lists(
        self,
        words_x: Sequence[str],
        words_y: Sequence[str]
    ) -> CorpusComparisonResult:
        """Compare mean word length of two lists of raw tokens"""
        lengths_x = words_to_word_lengths(words_x, self.config.min_word_length)
        lengths_y = words_to_word_lengths(words_y, self.config.min_word_length)

        logger.info("Extracted %d words for %s and %d words for %s",
                    len(lengths_x), self.config.label_x,
                    len(lengths_y), self.config.label_y)

        comparison = self.statistical_engine.compare_samples(
            lengths_x, lengths_y, self.config.alternative
        )

        return CorpusComparisonResult(
            label_x=self.config.label_x,
            label_y=self.config.label_y,
            word_lengths_x=lengths_x,
            word_lengths_y=lengths_y,
            comparison=comparison
        )

    def analyze_files(
        self,
        path_x: Union[str, Path],
        path_y: Union[str, Path]
    ) -> CorpusComparisonResult:
        """Compare mean word length of two text files"""
        logger.info("Loading corpora %s and %s", path_x, path_y)
        words_x = parse_to_word_list(path_x, self.config.encoding)
        words_y = parse_to_word_list(path_y, self.config.encoding)
        return self.analyze_word_lists(words_x, words_y)


# ========== COMMAND LINE ==========

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Test whether mean word length differs between two text corpora."
    )
    parser.add_argument("file_x", type=Path, help="First corpus (X)")
    parser.add_argument("file_y", type=Path, help="Second corpus (Y)")
    parser.add_argument(
        "--alternative",
        choices=[kind.value for kind in HypothesisTest],
        default=HypothesisTest.LESS_THAN.value,
        help="Alternative hypothesis for X relative to Y",
    )
    parser.add_argument("--label-x", default="X")
    parser.add_argument("--label-y", default="Y")
    parser.add_argument("--encoding", default="utf-8")
    parser.add_argument("--min-word-length", type=int, default=1)
    parser.add_argument("--log-level", default="WARNING")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = StudyConfig(
            label_x=args.label_x,
            label_y=args.label_y,
            alternative=args.alternative,
            encoding=args.encoding,
            min_word_length=args.min_word_length,
        )
        result = CorpusComparison(config).analyze_files(args.file_x, args.file_y)
    except (ValueError, OSError) as exc:
        logger.error("Comparison failed: %s", exc)
        return 1

    print(result.summary_frame().to_string(float_format=lambda v: f"{v:.4f}"))
    print(result.conclusion())
    return 0


if __name__ == "__main__":
    sys.exit(main())
