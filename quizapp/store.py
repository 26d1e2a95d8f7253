from flask import current_app
from sqlalchemy import func

from quizapp.models import Answer, Candidate, Question
from quizapp.utils import format_timestamp


class QuizStore:
    """Persistence for candidates, questions and answers.

    Built once by ``create_app`` and registered as
    ``app.extensions['quiz_store']``; request handlers reach it through
    :func:`get_store`. Every write is a single commit, nothing is wrapped in
    a wider transaction.
    """

    def __init__(self, db):
        self.db = db

    @property
    def session(self):
        return self.db.session

    # ==================== SCHEMA + SEED ====================
    def initialize(self):
        """Create missing tables, then seed questions if there are none."""
        from quizapp.data.seed import seed_questions

        self.db.create_all()
        inserted = seed_questions(self)
        if inserted:
            current_app.logger.info(f'Seeded {inserted} questions')
        return inserted

    def count_questions(self):
        return self.session.query(func.count(Question.id)).scalar()

    def add_questions(self, questions):
        for q in questions:
            self.session.add(Question(**q))
        self.session.commit()

    # ==================== CANDIDATES ====================
    def create_candidate(self, name, email):
        candidate = Candidate(name=name, email=email)
        self.session.add(candidate)
        self.session.commit()
        return candidate.id

    # ==================== QUESTIONS ====================
    def get_question_by_position(self, index):
        """Question at zero-based ``index`` in insertion order, or None.

        A negative index reads as 0, the way SQLite treats a negative OFFSET.
        """
        if index is None:
            return None
        index = max(index, 0)
        return Question.query.order_by(Question.id).offset(index).limit(1).first()

    def get_correct_answer(self, question_id):
        if question_id is None:
            return None
        question = self.db.session.get(Question, question_id)
        return question.correct if question else None

    # ==================== ANSWERS ====================
    def record_answer(self, candidate_id, question_id, submitted, is_correct):
        answer = Answer(
            candidate_id=candidate_id,
            question_id=question_id,
            answer=submitted,
            correct=is_correct,
        )
        self.session.add(answer)
        self.session.commit()
        return answer

    def get_candidate_score(self, candidate_id):
        """``{'score', 'total'}`` for a candidate; 0/0 when nothing is recorded."""
        if candidate_id is None:
            return {'score': 0, 'total': 0}
        total, score = self.session.query(
            func.count(Answer.id),
            func.coalesce(func.sum(Answer.correct), 0),
        ).filter(Answer.candidate_id == candidate_id).one()
        return {'score': int(score or 0), 'total': int(total or 0)}

    # ==================== REPORTING ====================
    def list_candidates_with_scores(self):
        """All candidates with derived score/total, newest start first."""
        score = func.coalesce(func.sum(Answer.correct), 0).label('score')
        total = func.count(Answer.id).label('total')
        rows = (
            self.session.query(Candidate, score, total)
            .outerjoin(Answer, Answer.candidate_id == Candidate.id)
            .group_by(Candidate.id)
            .order_by(Candidate.start_time.desc(), Candidate.id.desc())
            .all()
        )

        tz_name = current_app.config.get('TIMEZONE', 'UTC')
        return [
            {
                'id': candidate.id,
                'name': candidate.name,
                'email': candidate.email,
                'start_time': format_timestamp(candidate.start_time, tz_name),
                'score': int(row_score or 0),
                'total': int(row_total or 0),
            }
            for candidate, row_score, row_total in rows
        ]


def get_store():
    """Store instance registered on the current app"""
    return current_app.extensions['quiz_store']
