# poemfill — two-line poem fill-in-the-blank game engine
from poemfill.corpus import Corpus, Section, load_corpus, parse_corpus
from poemfill.evaluator import Verdict, evaluate
from poemfill.generator import start_round
from poemfill.pronunciation import resolve
from poemfill.round import BlankPosition, Candidate, FillResult, Round
from poemfill.session import GameSession
from poemfill.settings import ConfigError, CorpusError, GameConfig, PoemFillError

__all__ = [
    "BlankPosition",
    "Candidate",
    "ConfigError",
    "Corpus",
    "CorpusError",
    "FillResult",
    "GameConfig",
    "GameSession",
    "PoemFillError",
    "Round",
    "Section",
    "Verdict",
    "evaluate",
    "load_corpus",
    "parse_corpus",
    "resolve",
    "start_round",
]
