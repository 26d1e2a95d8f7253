"""
Seed data
=========
Fixed question set inserted on first start.

Modules:
- seed: load_seed_questions / seed_questions
"""

import os

# Đường dẫn đến thư mục data
DATA_DIR = os.path.dirname(os.path.abspath(__file__))

QUESTIONS_JSON = os.path.join(DATA_DIR, 'questions.json')

__all__ = ['DATA_DIR', 'QUESTIONS_JSON']
