from quizapp import db
from quizapp.utils import utc_now


# ==================== CANDIDATE MODEL ====================
class Candidate(db.Model):
    """Người làm bài - created once per /api/start call"""
    __tablename__ = 'candidates'
    __table_args__ = {'sqlite_autoincrement': True}

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.Text, nullable=False)
    email = db.Column(db.Text, nullable=False)
    start_time = db.Column(db.DateTime, default=utc_now, index=True)

    def __repr__(self):
        return f'<Candidate {self.name} - {self.email}>'


# ==================== QUESTION MODEL ====================
class Question(db.Model):
    """Câu hỏi trắc nghiệm, 4 options a-d"""
    __tablename__ = 'questions'
    __table_args__ = {'sqlite_autoincrement': True}

    OPTION_LABELS = ('a', 'b', 'c', 'd')

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    text = db.Column(db.Text, nullable=False)
    a = db.Column(db.Text, nullable=False)
    b = db.Column(db.Text, nullable=False)
    c = db.Column(db.Text, nullable=False)
    d = db.Column(db.Text, nullable=False)
    correct = db.Column(db.String(1), nullable=False)

    def __repr__(self):
        return f'<Question {self.text[:50]}>'

    @property
    def options(self):
        return {label: getattr(self, label) for label in self.OPTION_LABELS}

    def to_public_dict(self):
        """Question as served to candidates, without the correct label"""
        return {
            'id': self.id,
            'text': self.text,
            'options': self.options,
        }


# ==================== ANSWER MODEL ====================
class Answer(db.Model):
    """Một lần trả lời. Repeats for the same question are kept."""
    __tablename__ = 'answers'
    __table_args__ = {'sqlite_autoincrement': True}

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    candidate_id = db.Column(db.Integer, db.ForeignKey('candidates.id'), index=True)
    question_id = db.Column(db.Integer, db.ForeignKey('questions.id'))
    answer = db.Column(db.Text)
    correct = db.Column(db.Integer)

    def __repr__(self):
        return f'<Answer {self.candidate_id}/{self.question_id}: {self.answer}>'
