"""Learn Quiz Component.

Two videos side by side and a question about which did better. Rounds are
built once per filter selection and kept in session state with the score.
"""

import logging
import random
from dataclasses import asdict

import streamlit as st

from src.data_processing.content.metrics import METRIC_LABELS, format_metric_value, metric_value
from src.data_processing.content.quiz import QuizScore, build_rounds, check_answer, filter_questions
from src.dashboard.state.session import get_page_state
from src.dashboard.utils.style_config import SOURCE_LABELS, render_metric_card

logger = logging.getLogger(__name__)

PAGE_NAME = 'learn'

METRIC_FILTERS = {
    'all': 'All questions',
    'revenue': 'Revenue only',
    'views': 'Views only',
}

SOURCE_FILTERS = {
    'all': 'Both channels',
    'senbo': 'Senne & Bo',
    'senne': 'Senne',
}


def _reset_rounds(state: dict, items, metric_filter: str, source_filter: str):
    state['rounds'] = build_rounds(items, filter_questions(metric_filter), source_filter, rng=random.Random())
    state['index'] = 0
    state['answer'] = None
    state['filters'] = (metric_filter, source_filter)


def _render_side(quiz_round, side: str, revealed: bool, theme: str):
    item = getattr(quiz_round, side)
    st.image(f"https://img.youtube.com/vi/{item.video_id}/hqdefault.jpg", use_container_width=True)
    st.markdown(f"**{item.title}**  \n{SOURCE_LABELS.get(item.source, item.source)}")
    if revealed:
        metric = quiz_round.question.metric
        render_metric_card(METRIC_LABELS[metric], format_metric_value(metric_value(item, metric), metric), theme=theme)


def render_learn(items, theme: str):
    """Render the quiz for the given videos."""
    state = get_page_state(PAGE_NAME)
    score = QuizScore(**state.get('score', {}))

    col1, col2 = st.columns(2)
    with col1:
        metric_filter = st.selectbox("Questions", list(METRIC_FILTERS), format_func=METRIC_FILTERS.get)
    with col2:
        source_filter = st.selectbox("Channels", list(SOURCE_FILTERS), format_func=SOURCE_FILTERS.get)

    if state.get('filters') != (metric_filter, source_filter) or 'rounds' not in state:
        _reset_rounds(state, items, metric_filter, source_filter)

    rounds = state['rounds']
    if not rounds:
        st.info("Need at least two videos with a YouTube link to play.")
        return

    if state['index'] >= len(rounds):
        st.success(f"Finished! Score {score.score}/{score.answered}, best streak {score.high_streak}.")
        if st.button("Play again"):
            _reset_rounds(state, items, metric_filter, source_filter)
            st.rerun()
        return

    quiz_round = rounds[state['index']]
    st.caption(f"Round {state['index'] + 1} of {len(rounds)} · Score {score.score} · Streak {score.streak} "
               f"· Best {score.high_streak}")
    st.subheader(quiz_round.question.text)

    revealed = state['answer'] is not None
    left, right = st.columns(2)
    for column, side in ((left, 'left'), (right, 'right')):
        with column:
            _render_side(quiz_round, side, revealed, theme)
            if not revealed and st.button("This one", key=f"pick_{side}_{state['index']}"):
                correct = check_answer(quiz_round, side)
                score.record(correct)
                state['score'] = asdict(score)
                state['answer'] = correct
                st.rerun()

    if revealed:
        if state['answer']:
            st.success("Correct!")
        else:
            st.error("Not quite.")
        if st.button("Next"):
            state['index'] += 1
            state['answer'] = None
            st.rerun()
