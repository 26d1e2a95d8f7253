"""
Question seeding
================
Loads the fixed question set from questions.json and inserts it when the
questions table is empty. Running it again is a no-op.
"""

import json

from quizapp.data import QUESTIONS_JSON

REQUIRED_FIELDS = ('text', 'a', 'b', 'c', 'd', 'correct')
OPTION_LABELS = ('a', 'b', 'c', 'd')


class SeedDataError(ValueError):
    pass


def load_seed_questions(json_file=None):
    """Read and validate the seed file, keeping file order"""
    json_file = json_file or QUESTIONS_JSON
    with open(json_file, 'r', encoding='utf-8') as f:
        data = json.load(f)

    questions = []
    for idx, item in enumerate(data.get('questions', []), 1):
        missing = [k for k in REQUIRED_FIELDS if not item.get(k)]
        if missing:
            raise SeedDataError(f"Question {idx}: missing {', '.join(missing)}")
        if item['correct'] not in OPTION_LABELS:
            raise SeedDataError(f"Question {idx}: correct must be one of a-d, got {item['correct']!r}")
        questions.append({k: item[k] for k in REQUIRED_FIELDS})
    return questions


def seed_questions(store, json_file=None):
    """Insert the seed set if no questions exist. Returns how many were inserted."""
    if store.count_questions():
        return 0
    questions = load_seed_questions(json_file)
    store.add_questions(questions)
    return len(questions)
