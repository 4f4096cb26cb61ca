"""
Learn quiz.

Builds "which video did better?" rounds from real video stats and scores
the answers. Rounds are random but reproducible when a seeded
``random.Random`` is passed in.
"""
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .metrics import Metric, metric_value
from .models import ContentItem


@dataclass(frozen=True)
class Question:
    id: str
    text: str
    metric: Metric
    higher_wins: bool


QUESTIONS: List[Question] = [
    Question('more-revenue', 'Which video earned MORE revenue?', Metric.REVENUE, True),
    Question('less-revenue', 'Which video earned LESS revenue?', Metric.REVENUE, False),
    Question('more-views', 'Which video got MORE views?', Metric.VIEWS, True),
    Question('less-views', 'Which video got LESS views?', Metric.VIEWS, False),
    Question('more-likes', 'Which video got MORE likes?', Metric.LIKES, True),
    Question('more-shares', 'Which video got MORE shares?', Metric.SHARES, True),
    Question('more-subs', 'Which video gained MORE subscribers?', Metric.SUBS_GAINED, True),
    Question('less-subs', 'Which video gained LESS subscribers?', Metric.SUBS_GAINED, False),
    Question('more-watchtime', 'Which video has MORE watch time?', Metric.MINUTES_WATCHED, True),
]

# Attempt pattern used when both channels are in play
_PAIR_PATTERN = ('mixed', 'mixed', 'senbo', 'senne')


@dataclass(frozen=True)
class QuizRound:
    left: ContentItem
    right: ContentItem
    question: Question


@dataclass
class QuizScore:
    """Running score for a quiz session."""
    score: int = 0
    streak: int = 0
    high_streak: int = 0
    answered: int = 0

    def record(self, correct: bool) -> None:
        self.answered += 1
        if correct:
            self.score += 1
            self.streak += 1
            self.high_streak = max(self.high_streak, self.streak)
        else:
            self.streak = 0


def filter_questions(metric_filter: str = 'all') -> List[Question]:
    """Questions for ``all``, ``revenue`` or ``views``."""
    if metric_filter == 'revenue':
        return [q for q in QUESTIONS if q.metric == Metric.REVENUE]
    if metric_filter == 'views':
        return [q for q in QUESTIONS if q.metric == Metric.VIEWS]
    return list(QUESTIONS)


def _pick_pair(pool: Sequence[ContentItem], rng: random.Random):
    if len(pool) < 2:
        return None, None
    left, right = rng.sample(list(pool), 2)
    return left, right


def build_rounds(items: Sequence[ContentItem],
                 questions: Sequence[Question],
                 source_filter: str = 'all',
                 rng: Optional[random.Random] = None,
                 max_rounds: int = 50,
                 max_attempts: int = 200) -> List[QuizRound]:
    """Generate quiz rounds.

    Args:
        items: Videos to draw from; items without a video id are ignored
        questions: Question pool to draw from
        source_filter: ``all``, ``senbo`` or ``senne``
        rng: Random source, seeded for reproducible rounds
        max_rounds: Maximum number of rounds
        max_attempts: Maximum pair draws before giving up

    Returns:
        Rounds with distinct videos per pair and no repeated pair
    """
    rng = rng or random.Random()
    videos = [item for item in items if item.video_id]
    if source_filter != 'all':
        videos = [item for item in videos if item.source == source_filter]
    if len(videos) < 2 or not questions:
        return []

    senbo = [v for v in videos if v.source == 'senbo']
    senne = [v for v in videos if v.source == 'senne']
    balance = source_filter == 'all' and senbo and senne

    rounds: List[QuizRound] = []
    used_pairs = set()
    for attempt in range(max_attempts):
        if len(rounds) >= max_rounds:
            break

        left = right = None
        if balance:
            pair_type = _PAIR_PATTERN[attempt % len(_PAIR_PATTERN)]
            if pair_type == 'mixed':
                left, right = rng.choice(senbo), rng.choice(senne)
            elif pair_type == 'senbo':
                left, right = _pick_pair(senbo, rng)
            else:
                left, right = _pick_pair(senne, rng)

        if left is None or right is None:
            left, right = _pick_pair(videos, rng)

        if left.video_id == right.video_id:
            continue
        pair_key = tuple(sorted((left.identity, right.identity)))
        if pair_key in used_pairs:
            continue
        used_pairs.add(pair_key)

        rounds.append(QuizRound(left=left, right=right, question=rng.choice(list(questions))))

    return rounds


def check_answer(quiz_round: QuizRound, choice: str) -> bool:
    """Whether picking ``left`` or ``right`` answers the round correctly.

    A tie is never correct.
    """
    if choice not in ('left', 'right'):
        raise ValueError(f"choice must be 'left' or 'right', got {choice!r}")
    metric = quiz_round.question.metric
    left_value = metric_value(quiz_round.left, metric)
    right_value = metric_value(quiz_round.right, metric)
    chosen, other = (left_value, right_value) if choice == 'left' else (right_value, left_value)
    return chosen > other if quiz_round.question.higher_wins else chosen < other
